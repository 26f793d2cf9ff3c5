"""Paper-folding curves: the Lévy C curve and the Heighway dragon."""

from __future__ import annotations

import math

from foldcharts.config import clamp_complexity, limits
from foldcharts.errors import UnsupportedChartKindError
from foldcharts.generator.orders import OrderConfig, OrderKind, generate_orders as build_orders
from foldcharts.kinds.fold.generator import expected_point_count, generate_points
from foldcharts.kinds.fold.models import Fold, FoldRule
from foldcharts.models.shape import BaseChartConfig, ChartKind, Order, Point
from foldcharts.registry import chart

_RADIAN = math.radians(45.0)
_LENGTH = 1.0 / math.sqrt(2.0)

LEFT_FOLD = Fold(length=_LENGTH, radian=_RADIAN)
RIGHT_FOLD = Fold(length=_LENGTH, radian=-_RADIAN)

FOLD_RULES: dict[ChartKind, tuple[FoldRule, ...]] = {
    ChartKind.FOLD_C_CURVE: (FoldRule(folds=(RIGHT_FOLD,)),),
    # Alternating by sibling branch
    ChartKind.FOLD_DRAGON: (FoldRule(folds=(LEFT_FOLD,)), FoldRule(folds=(RIGHT_FOLD,))),
}


def select_fold_rules(kind: ChartKind) -> tuple[FoldRule, ...]:
    try:
        return FOLD_RULES[kind]
    except KeyError:
        raise UnsupportedChartKindError(f"Not a fold curve: {kind.value}") from None


def point_count(complexity: int) -> int:
    c = clamp_complexity(complexity, limits.fold_curve_complexity)
    return expected_point_count(c, folds_per_rule=1)


def generate_orders(complexity: int) -> list[Order]:
    return build_orders(OrderConfig(kind=OrderKind.LINEAR, point_count=point_count(complexity)))


@chart(
    kinds={ChartKind.FOLD_C_CURVE, ChartKind.FOLD_DRAGON},
    orders=generate_orders,
    point_count=point_count,
    requires_randomization=True,
    tags={"fold"},
    description="Single-fold paper curves (C curve, dragon)",
)
def generate_base_points(config: BaseChartConfig) -> list[Point]:
    rules = select_fold_rules(config.kind)
    c = clamp_complexity(config.complexity, limits.fold_curve_complexity)
    return generate_points(config, rules, complexity=c)
