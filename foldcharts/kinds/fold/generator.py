"""Fractal fold engine — recursive subdivision of a segment by cyclic fold rules.

Each call applies ``rules[branch % len(rules)]`` to one segment, producing
``[start, *folds, end]``. Below the leaf depth every consecutive pair is
subdivided again, with children numbered ``branch * (len(rule) + 1) + i`` so
sibling branches (not depths) cycle through the rules.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from foldcharts.kinds.fold.models import FoldRule
from foldcharts.kinds.mutation import MutationState
from foldcharts.models.shape import BaseChartConfig, Point

logger = logging.getLogger(__name__)

START = Point(x=-1.0, y=0.0)
END = Point(x=1.0, y=0.0)
# The root rule is applied once before branch multiplicities are tracked
ROOT_DEPTH = 2


def fold_points(state: MutationState, start: Point, end: Point, rule: FoldRule) -> list[Point]:
    """Derived points of ``rule`` applied to segment (start, end), in fold order."""
    vector = end - start
    derived: list[Point] = []
    for i, fold in enumerate(rule.folds):
        if i == 0 or fold.from_start:
            anchor = start
        elif fold.from_end:
            anchor = end
        else:
            anchor = derived[i - 1]
        # Measured backward from the end, so the handedness flips
        sign = -1.0 if fold.from_end else 1.0
        length, radian = state.draw(fold.length, fold.radian)
        derived.append(anchor.rotate_by(vector.scaled(sign * length), radian))
    return derived


def _recurse(
    complexity: int,
    state: MutationState,
    branch: int,
    depth: int,
    start: Point,
    end: Point,
    rules: Sequence[FoldRule],
) -> list[Point]:
    rule = rules[branch % len(rules)]
    local = [start, *fold_points(state, start, end, rule), end]

    if depth >= complexity:
        # Each segment's start is the previous segment's end
        return local if branch == 0 else local[1:]

    points: list[Point] = []
    stride = len(rule) + 1
    for i in range(len(local) - 1):
        points.extend(
            _recurse(
                complexity,
                state,
                stride * branch + i,
                depth + 1,
                local[i],
                local[i + 1],
                rules,
            )
        )
    return points


def generate_points(
    config: BaseChartConfig,
    rules: Sequence[FoldRule],
    complexity: int | None = None,
) -> list[Point]:
    """Full point path from (-1, 0) to (1, 0) for ``rules``.

    ``complexity`` overrides ``config.complexity``; adapters pass their
    clamped value. Raises MissingRandomizationError without mutation and
    randomizer.
    """
    if not rules:
        raise ValueError("At least one fold rule is required")
    state = MutationState.from_config(config)
    target = config.complexity if complexity is None else complexity
    points = _recurse(target, state, 0, ROOT_DEPTH, START, END, rules)
    logger.debug(
        "Folded %d rule(s) to depth %d: %d points",
        len(rules),
        target,
        len(points),
    )
    return points


def expected_point_count(complexity: int, folds_per_rule: int) -> int:
    """Point count of a path folded to ``complexity`` with uniform rule length."""
    levels = max(complexity - ROOT_DEPTH + 1, 1)
    return (folds_per_rule + 1) ** levels + 1
