"""Koch curve — each segment replaced by four thirds with a 60° spike."""

from __future__ import annotations

import math

from foldcharts.config import clamp_complexity, limits
from foldcharts.errors import UnsupportedChartKindError
from foldcharts.generator.orders import OrderConfig, OrderKind, generate_orders as build_orders
from foldcharts.kinds.fold.generator import expected_point_count, generate_points
from foldcharts.kinds.fold.models import Fold, FoldRule
from foldcharts.models.shape import BaseChartConfig, ChartKind, Order, Point
from foldcharts.registry import chart

_THIRD = 1.0 / 3.0
_SPIKE = math.radians(60.0)

KOCH_RULES: tuple[FoldRule, ...] = (
    FoldRule(
        folds=(
            Fold(length=_THIRD, radian=0.0),
            Fold(length=_THIRD, radian=_SPIKE),
            Fold(length=_THIRD, radian=-_SPIKE),
        )
    ),
)


def point_count(complexity: int) -> int:
    c = clamp_complexity(complexity, limits.fold_triple_complexity)
    return expected_point_count(c, folds_per_rule=3)


def generate_orders(complexity: int) -> list[Order]:
    return build_orders(OrderConfig(kind=OrderKind.LINEAR, point_count=point_count(complexity)))


def koch_points(config: BaseChartConfig) -> list[Point]:
    """Koch path from (-1, 0) to (1, 0), shared with the Koch triangles."""
    c = clamp_complexity(config.complexity, limits.fold_triple_complexity)
    return generate_points(config, KOCH_RULES, complexity=c)


@chart(
    kinds={ChartKind.KOCH_CURVE},
    orders=generate_orders,
    point_count=point_count,
    requires_randomization=True,
    tags={"fold"},
    description="Koch curve",
)
def generate_base_points(config: BaseChartConfig) -> list[Point]:
    if config.kind is not ChartKind.KOCH_CURVE:
        raise UnsupportedChartKindError(f"Not a Koch curve: {config.kind.value}")
    return koch_points(config)
