"""Configuration: environment settings and complexity limits."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    foldcharts_env: str = "development"
    foldcharts_log_level: str = "info"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@dataclass(frozen=True)
class ChartLimits:
    """Complexity clamps per adapter family.

    Every fold level multiplies the point count by (folds + 1), so the upper
    bounds keep the largest chart in the tens of thousands of points.
    """

    # FoldCCurve / FoldDragon: 2^(c-1) + 1 points
    fold_curve_complexity: tuple[int, int] = (2, 16)
    # KochCurve, KochTriangle*, TriCis / TriTrans: 4^(c-1) + 1 points
    fold_triple_complexity: tuple[int, int] = (2, 8)
    # BinaryTree: 2^(c+1) points
    binary_tree_complexity: tuple[int, int] = (2, 10)

    # Absolute epsilon for Point equality
    point_tolerance: float = 1e-9


settings = Settings()
limits = ChartLimits()


def clamp_complexity(complexity: int, bounds: tuple[int, int]) -> int:
    low, high = bounds
    clamped = max(min(complexity, high), low)
    if clamped != complexity:
        logger.debug("Complexity %d clamped to %d (bounds %d..%d)", complexity, clamped, low, high)
    return clamped
