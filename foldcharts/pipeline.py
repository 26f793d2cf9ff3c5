"""Chart pipeline — runs one adapter pair and checks that its halves agree."""

from __future__ import annotations

import logging
import time
from collections.abc import Generator, Iterable

from foldcharts.errors import ChartConsistencyError, MissingRandomizationError
from foldcharts.models.chart import Chart
from foldcharts.models.shape import BaseChartConfig, ChartKind, Order, Point
from foldcharts.registry import ChartRegistry, get_registry

logger = logging.getLogger(__name__)


class ChartPipeline:
    """Generates points and orders for a config through the chart registry."""

    def __init__(self, registry: ChartRegistry | None = None, validate: bool = True) -> None:
        self.registry = registry or get_registry()
        self.validate = validate

    def run(self, config: BaseChartConfig) -> Chart:
        """Generate the full chart for ``config``."""
        start = time.perf_counter()
        spec = self.registry.get(config.kind)
        if spec.requires_randomization and (config.mutation is None or config.randomizer is None):
            raise MissingRandomizationError(
                f"{config.kind.value} needs both mutation and randomizer"
            )

        points = spec.points(config)
        orders = spec.orders(config.complexity)
        result = Chart(
            kind=config.kind,
            complexity=config.complexity,
            points=points,
            orders=orders,
        )
        if self.validate:
            expected = spec.point_count(config.complexity) if spec.point_count else None
            self.check(result, expected_points=expected)

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Chart %s (complexity %d): %d points, %d orders in %.1fms",
            config.kind.value,
            config.complexity,
            result.point_count,
            result.order_count,
            elapsed,
        )
        return result

    def run_points(self, config: BaseChartConfig) -> list[Point]:
        return self.registry.get(config.kind).points(config)

    def run_orders(self, kind: ChartKind, complexity: int) -> list[Order]:
        return self.registry.get(kind).orders(complexity)

    def run_many(self, configs: Iterable[BaseChartConfig]) -> Generator[Chart, None, None]:
        """Yield one chart per config, in order. Stops at the first failure."""
        for config in configs:
            yield self.run(config)

    def check(self, result: Chart, expected_points: int | None = None) -> None:
        """Raise ChartConsistencyError if points and orders disagree.

        Every order must reference an existing point, and the point count must
        match ``expected_points`` (the adapter's formula). Without a formula the
        orders must reach the last point.
        """
        bad = result.invalid_orders()
        if bad:
            first = result.orders[bad[0]].link
            logger.error(
                "Chart %s: %d of %d orders out of range (first %s, %d points)",
                result.kind.value,
                len(bad),
                result.order_count,
                first,
                result.point_count,
            )
            raise ChartConsistencyError(
                f"{result.kind.value}: order {first} out of range for {result.point_count} points"
            )

        if expected_points is None:
            if not result.orders:
                return
            expected_points = max(max(o.link) for o in result.orders) + 1
        if result.point_count != expected_points:
            logger.error(
                "Chart %s: %d points generated, orders expect %d",
                result.kind.value,
                result.point_count,
                expected_points,
            )
            raise ChartConsistencyError(
                f"{result.kind.value}: {result.point_count} points, orders expect {expected_points}"
            )


def create_pipeline(registry: ChartRegistry | None = None) -> ChartPipeline:
    """Factory function for creating a pipeline instance."""
    return ChartPipeline(registry=registry)
