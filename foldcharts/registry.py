"""Chart registry — a closed dispatch table from ChartKind to its adapter pair.

Usage:
    def generate_orders(complexity: int) -> list[Order]:
        return ...

    @chart(kinds={ChartKind.STAR}, orders=generate_orders, description="Star polygon")
    def generate_base_points(config: BaseChartConfig) -> list[Point]:
        return ...

Adding a kind = one enum member plus one module with the decorator.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from foldcharts.errors import UnsupportedChartKindError
from foldcharts.models.shape import BaseChartConfig, ChartKind, Order, Point

logger = logging.getLogger(__name__)

PointsFn = Callable[[BaseChartConfig], list[Point]]
OrdersFn = Callable[[int], list[Order]]
CountFn = Callable[[int], int]


@dataclass
class ChartSpec:
    kind: ChartKind
    points: PointsFn
    orders: OrdersFn
    # Point-count formula shared by both halves; None for ad-hoc specs
    point_count: CountFn | None = None
    requires_randomization: bool = False
    tags: set[str] = field(default_factory=set)
    description: str = ""


class ChartRegistry:
    """One ChartSpec per ChartKind."""

    def __init__(self) -> None:
        self._charts: dict[ChartKind, ChartSpec] = {}

    def register(self, spec: ChartSpec) -> None:
        if spec.kind in self._charts:
            raise ValueError(f"Duplicate chart kind: {spec.kind.value}")
        self._charts[spec.kind] = spec
        logger.debug("Registered chart %s", spec.kind.value)

    def get(self, kind: ChartKind) -> ChartSpec:
        try:
            return self._charts[kind]
        except KeyError:
            raise UnsupportedChartKindError(f"No adapter registered for {kind.value}") from None

    def all(self) -> list[ChartSpec]:
        return sorted(self._charts.values(), key=lambda s: s.kind.value)

    def with_tag(self, tag: str) -> list[ChartSpec]:
        return [s for s in self.all() if tag in s.tags]

    def missing_kinds(self) -> list[ChartKind]:
        return [k for k in ChartKind if k not in self._charts]

    @property
    def count(self) -> int:
        return len(self._charts)


# Module-level singleton
_registry = ChartRegistry()


def get_registry() -> ChartRegistry:
    return _registry


def chart(
    *,
    kinds: set[ChartKind],
    orders: OrdersFn,
    point_count: CountFn | None = None,
    requires_randomization: bool = False,
    tags: set[str] | None = None,
    description: str = "",
):
    """Decorator registering a points function, with its orders function and
    point-count formula, for each kind."""

    def decorator(fn: PointsFn):
        for kind in sorted(kinds, key=lambda k: k.value):
            _registry.register(
                ChartSpec(
                    kind=kind,
                    points=fn,
                    orders=orders,
                    point_count=point_count,
                    requires_randomization=requires_randomization,
                    tags=tags or set(),
                    description=description,
                )
            )
        return fn

    return decorator
