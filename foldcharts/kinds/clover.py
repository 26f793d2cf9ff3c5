"""Clover — the rose curve r = sin(c·θ) sampled at 40·c points."""

from __future__ import annotations

import math

from foldcharts.generator.orders import OrderConfig, OrderKind, generate_orders as build_orders
from foldcharts.models.shape import BaseChartConfig, ChartKind, Order, Point
from foldcharts.registry import chart

SAMPLES_PER_COMPLEXITY = 40


def point_count(complexity: int) -> int:
    return SAMPLES_PER_COMPLEXITY * complexity


def generate_orders(complexity: int) -> list[Order]:
    return build_orders(OrderConfig(kind=OrderKind.LOOP, point_count=point_count(complexity)))


@chart(
    kinds={ChartKind.CLOVER},
    orders=generate_orders,
    point_count=point_count,
    tags={"closed_form"},
    description="Rose curve with c petal lobes",
)
def generate_base_points(config: BaseChartConfig) -> list[Point]:
    n = point_count(config.complexity)
    points: list[Point] = []
    for i in range(n):
        angle = (2.0 * math.pi * i) / n
        amplitude = math.sin(config.complexity * angle)
        points.append(
            Point(x=amplitude * math.cos(angle - math.pi), y=amplitude * math.sin(angle - math.pi))
        )
    return points
