"""foldcharts — point and order generation for line-art charts."""

from foldcharts.main import configure_logging, generate, register_charts
from foldcharts.models import (
    BaseChartConfig,
    Chart,
    ChartKind,
    Mutation,
    Order,
    Point,
    Randomizer,
    Size,
)
from foldcharts.pipeline import ChartPipeline

__all__ = [
    "BaseChartConfig",
    "Chart",
    "ChartKind",
    "ChartPipeline",
    "Mutation",
    "Order",
    "Point",
    "Randomizer",
    "Size",
    "configure_logging",
    "generate",
    "register_charts",
]
