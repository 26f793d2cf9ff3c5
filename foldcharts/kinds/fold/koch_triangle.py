"""Koch triangles — three Koch curves rotated 120° apart around the origin.

The outer variant points its spikes away from the centre; the inner variant
mirrors the curve in y first so the spikes point inward.
"""

from __future__ import annotations

import math

from foldcharts.errors import UnsupportedChartKindError
from foldcharts.generator.orders import OrderConfig, OrderKind, generate_orders as build_orders
from foldcharts.kinds.fold import koch_curve
from foldcharts.models.shape import BaseChartConfig, ChartKind, Order, Point
from foldcharts.registry import chart

_ORIGIN = Point(x=0.0, y=0.0)
_TURN = math.radians(120.0)
# Distance from the centroid of a side-2 equilateral triangle to a side
_OFFSET = 1.0 / math.sqrt(3.0)


def point_count(complexity: int) -> int:
    return 3 * koch_curve.point_count(complexity)


def generate_orders(complexity: int) -> list[Order]:
    return build_orders(OrderConfig(kind=OrderKind.LINEAR, point_count=point_count(complexity)))


@chart(
    kinds={ChartKind.KOCH_TRIANGLE_INNER, ChartKind.KOCH_TRIANGLE_OUTER},
    orders=generate_orders,
    point_count=point_count,
    requires_randomization=True,
    tags={"fold", "composite"},
    description="Three rotated Koch curves (inner / outer spikes)",
)
def generate_base_points(config: BaseChartConfig) -> list[Point]:
    if config.kind is ChartKind.KOCH_TRIANGLE_INNER:
        inner = True
    elif config.kind is ChartKind.KOCH_TRIANGLE_OUTER:
        inner = False
    else:
        raise UnsupportedChartKindError(f"Not a Koch triangle: {config.kind.value}")

    side = koch_curve.koch_points(config)
    if inner:
        side = [Point(x=p.x, y=-p.y) for p in side]
    side = [Point(x=p.x, y=p.y + _OFFSET) for p in side]

    points = list(side)
    points.extend(_ORIGIN.rotate_by(p, _TURN) for p in side)
    points.extend(_ORIGIN.rotate_by(p, 2.0 * _TURN) for p in side)
    return points
