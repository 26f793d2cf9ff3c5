"""Right-angle tri curves: two triangular bumps folded from both ends.

Each rule replaces a segment with four steps: a perpendicular rise at the
start, the segment midpoint, and a perpendicular rise at the end on the
same side (cis) or the opposite side (trans).
"""

from __future__ import annotations

import math

from foldcharts.config import clamp_complexity, limits
from foldcharts.errors import UnsupportedChartKindError
from foldcharts.generator.orders import OrderConfig, OrderKind, generate_orders as build_orders
from foldcharts.kinds.fold.generator import expected_point_count, generate_points
from foldcharts.kinds.fold.models import Fold, FoldRule
from foldcharts.models.shape import BaseChartConfig, ChartKind, Order, Point
from foldcharts.registry import chart

_HALF = 0.5
_RIGHT = math.radians(90.0)


def _rule(last_radian: float) -> FoldRule:
    return FoldRule(
        folds=(
            Fold(length=_HALF, radian=_RIGHT),
            Fold(length=_HALF, radian=0.0, from_start=True),
            Fold(length=_HALF, radian=last_radian, from_end=True),
        )
    )


TRI_RULES: dict[ChartKind, tuple[FoldRule, ...]] = {
    ChartKind.TRI_CIS: (_rule(-_RIGHT),),
    ChartKind.TRI_TRANS: (_rule(_RIGHT),),
}


def select_fold_rules(kind: ChartKind) -> tuple[FoldRule, ...]:
    try:
        return TRI_RULES[kind]
    except KeyError:
        raise UnsupportedChartKindError(f"Not a tri curve: {kind.value}") from None


def point_count(complexity: int) -> int:
    c = clamp_complexity(complexity, limits.fold_triple_complexity)
    return expected_point_count(c, folds_per_rule=3)


def generate_orders(complexity: int) -> list[Order]:
    return build_orders(OrderConfig(kind=OrderKind.LINEAR, point_count=point_count(complexity)))


@chart(
    kinds={ChartKind.TRI_CIS, ChartKind.TRI_TRANS},
    orders=generate_orders,
    point_count=point_count,
    requires_randomization=True,
    tags={"fold"},
    description="Right-angle tri curves (cis / trans)",
)
def generate_base_points(config: BaseChartConfig) -> list[Point]:
    rules = select_fold_rules(config.kind)
    c = clamp_complexity(config.complexity, limits.fold_triple_complexity)
    return generate_points(config, rules, complexity=c)
