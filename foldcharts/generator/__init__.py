"""Non-recursive building blocks: seeded draws, order and point layouts."""

from foldcharts.generator.orders import OrderConfig, OrderKind, generate_orders
from foldcharts.generator.points import PointKind, PointsConfig, generate_points
from foldcharts.generator.randomizer import RandomGenerator

__all__ = [
    "OrderConfig",
    "OrderKind",
    "PointKind",
    "PointsConfig",
    "RandomGenerator",
    "generate_orders",
    "generate_points",
]
