from foldcharts.models.chart import Chart
from foldcharts.models.shape import (
    BaseChartConfig,
    ChartKind,
    Mutation,
    Order,
    Point,
    Randomizer,
    Size,
)

__all__ = [
    "BaseChartConfig",
    "Chart",
    "ChartKind",
    "Mutation",
    "Order",
    "Point",
    "Randomizer",
    "Size",
]
