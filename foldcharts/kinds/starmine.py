"""Starmine — a closed spiky star alternating unit and quarter radius."""

from __future__ import annotations

import math

from foldcharts.generator.orders import OrderConfig, OrderKind, generate_orders as build_orders
from foldcharts.models.shape import BaseChartConfig, ChartKind, Order, Point
from foldcharts.registry import chart

OUTER_RADIUS = 1.0
INNER_RADIUS = 0.25


def point_count(complexity: int) -> int:
    return 2 * complexity


def generate_orders(complexity: int) -> list[Order]:
    return build_orders(OrderConfig(kind=OrderKind.LOOP, point_count=point_count(complexity)))


@chart(
    kinds={ChartKind.STARMINE},
    orders=generate_orders,
    point_count=point_count,
    tags={"closed_form"},
    description="Star outline with c spikes",
)
def generate_base_points(config: BaseChartConfig) -> list[Point]:
    n = point_count(config.complexity)
    points: list[Point] = []
    for i in range(n):
        angle = (2.0 * math.pi * i) / n - math.pi
        radius = OUTER_RADIUS if i % 2 == 0 else INNER_RADIUS
        points.append(Point(x=radius * math.cos(angle), y=radius * math.sin(angle)))
    return points
