"""Base point layouts with no recursive structure."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

import numpy as np

from foldcharts.models.shape import Point


class PointKind(enum.Enum):
    CIRCLE = "circle"
    RANDOM = "random"


@dataclass(frozen=True)
class PointsConfig:
    kind: PointKind
    length: int


def generate_points(config: PointsConfig) -> list[Point]:
    """Circle: unit circle from (0, 1) going clockwise, (sin θ, cos θ).
    Random: uniform in [-0.5, 0.5)², unseeded.
    """
    n = config.length
    if config.kind is PointKind.CIRCLE:
        radians = [(2.0 * math.pi * i) / n for i in range(n)]
        return [Point(x=math.sin(r), y=math.cos(r)) for r in radians]
    if config.kind is PointKind.RANDOM:
        rng = np.random.default_rng()
        coords = rng.random((n, 2)) - 0.5
        return [Point(x=float(x), y=float(y)) for x, y in coords]
    raise ValueError(f"Unknown point kind: {config.kind}")
