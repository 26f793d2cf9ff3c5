"""Binary tree — recursive two-way branching with heap-style point indices.

Points carry an implicit binary index (children of i are 2i and 2i+1, the
stem is 0 -> 1). After recursion they are sorted by that index, which lets
the orders be rebuilt from index arithmetic alone: the parent of i is i // 2.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from foldcharts.config import clamp_complexity, limits
from foldcharts.errors import UnsupportedChartKindError
from foldcharts.kinds.mutation import MutationState
from foldcharts.models.shape import BaseChartConfig, ChartKind, Order, Point
from foldcharts.registry import chart

logger = logging.getLogger(__name__)

ROOT = Point(x=0.0, y=-1.0)
STEM = Point(x=0.0, y=0.0)
BASE_LENGTH = 0.85
BASE_ANGLE = math.radians(45.0)


@dataclass(frozen=True)
class IndexedPoint:
    index: int
    point: Point


def point_count(complexity: int) -> int:
    c = clamp_complexity(complexity, limits.binary_tree_complexity)
    return 2 ** (c + 1)


def divide_base_points(
    depth_threshold: int,
    state: MutationState,
    start: IndexedPoint,
    end: IndexedPoint,
    depth: int,
    parent_length: float,
    parent_angle: float,
) -> list[IndexedPoint]:
    """Children of segment (start, end) and all their descendants.

    ``depth`` is the heap index of ``end``. Draws are taken before the
    threshold check so leaf calls still advance both streams.
    """
    length, angle = state.draw(parent_length, parent_angle)
    if depth >= depth_threshold:
        return []

    vector = (end.point - start.point).scaled(length)
    left = IndexedPoint(index=2 * depth, point=end.point.rotate_by(vector, angle))
    right = IndexedPoint(index=2 * depth + 1, point=end.point.rotate_by(vector, -angle))

    result = [left, right]
    result.extend(
        divide_base_points(depth_threshold, state, end, left, left.index, length, angle)
    )
    result.extend(
        divide_base_points(depth_threshold, state, end, right, right.index, length, angle)
    )
    return result


def generate_orders(complexity: int) -> list[Order]:
    """Edge to every non-root point i from its heap parent i // 2."""
    return [Order(link=((i + 1) // 2, i + 1)) for i in range(point_count(complexity) - 1)]


@chart(
    kinds={ChartKind.BINARY_TREE},
    orders=generate_orders,
    point_count=point_count,
    requires_randomization=True,
    tags={"tree"},
    description="Randomized binary branching tree",
)
def generate_base_points(config: BaseChartConfig) -> list[Point]:
    if config.kind is not ChartKind.BINARY_TREE:
        raise UnsupportedChartKindError(f"Not a binary tree: {config.kind.value}")
    state = MutationState.from_config(config)

    root = IndexedPoint(index=0, point=ROOT)
    stem = IndexedPoint(index=1, point=STEM)
    depth_threshold = point_count(config.complexity) // 2

    points = [root, stem]
    points.extend(
        divide_base_points(depth_threshold, state, root, stem, 1, BASE_LENGTH, BASE_ANGLE)
    )
    # Emission is left subtree first; heap order is breadth first
    points.sort(key=lambda p: p.index)
    logger.debug("Binary tree grown to %d points", len(points))
    return [p.point for p in points]
