"""Circle-based string charts: star polygon, sunrise and sunset fans.

All three place c points on the unit circle; they differ only in how the
thread skips between them.
"""

from __future__ import annotations

from foldcharts.errors import UnsupportedChartKindError
from foldcharts.generator.orders import OrderConfig, OrderKind, generate_orders as build_orders
from foldcharts.generator.points import PointKind, PointsConfig, generate_points
from foldcharts.models.shape import BaseChartConfig, ChartKind, Order, Point
from foldcharts.registry import chart


def point_count(complexity: int) -> int:
    return complexity


def _circle(complexity: int) -> list[Point]:
    return generate_points(PointsConfig(kind=PointKind.CIRCLE, length=point_count(complexity)))


def star_orders(complexity: int) -> list[Order]:
    return build_orders(
        OrderConfig(kind=OrderKind.START_END_2X_FASTER, point_count=point_count(complexity))
    )


def fan_orders(complexity: int) -> list[Order]:
    # Self-loops for even complexity are kept as-is
    return build_orders(
        OrderConfig(kind=OrderKind.END_2X_FASTER, point_count=point_count(complexity))
    )


@chart(
    kinds={ChartKind.STAR},
    orders=star_orders,
    point_count=point_count,
    tags={"closed_form", "circle"},
    description="Star polygon skipping every other point",
)
def star_points(config: BaseChartConfig) -> list[Point]:
    return _circle(config.complexity)


@chart(
    kinds={ChartKind.SUNRISE, ChartKind.SUNSET},
    orders=fan_orders,
    point_count=point_count,
    tags={"closed_form", "circle"},
    description="Cardioid-like fans; sunset is sunrise mirrored top to bottom",
)
def fan_points(config: BaseChartConfig) -> list[Point]:
    points = _circle(config.complexity)
    if config.kind is ChartKind.SUNRISE:
        return points
    if config.kind is ChartKind.SUNSET:
        return [Point(x=p.x, y=-p.y) for p in points]
    raise UnsupportedChartKindError(f"Not a fan chart: {config.kind.value}")
