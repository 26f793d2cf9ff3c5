"""Fold rules — declarative description of one subdivision step."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Fold:
    """One derived point of a subdivision step.

    ``length`` is a ratio of the parent segment and ``radian`` the rotation of
    the parent vector. The anchor is the segment start for the first fold or
    when ``from_start``, the segment end when ``from_end``, otherwise the
    previous derived point.
    """

    length: float
    radian: float
    from_start: bool | None = None
    from_end: bool | None = None


@dataclass(frozen=True)
class FoldRule:
    folds: tuple[Fold, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.folds)
