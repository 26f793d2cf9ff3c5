"""Entry point — logging setup, adapter discovery and ``generate``."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import threading

from dotenv import load_dotenv

from foldcharts.config import settings
from foldcharts.errors import UnsupportedChartKindError
from foldcharts.models.chart import Chart
from foldcharts.models.shape import BaseChartConfig
from foldcharts.pipeline import ChartPipeline
from foldcharts.registry import get_registry

logger = logging.getLogger(__name__)

_pipeline: ChartPipeline | None = None
_pipeline_lock = threading.Lock()


def configure_logging() -> None:
    load_dotenv()
    logging.basicConfig(
        level=getattr(logging, settings.foldcharts_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    logger.info("foldcharts logging configured (env=%s)", settings.foldcharts_env)


def register_charts() -> None:
    """Import all adapter modules so @chart decorators fire, then check coverage."""
    for package_name in ["foldcharts.kinds", "foldcharts.kinds.fold"]:
        package = importlib.import_module(package_name)
        for _, module_name, is_pkg in pkgutil.iter_modules(package.__path__):
            if not is_pkg:
                importlib.import_module(f"{package_name}.{module_name}")

    missing = get_registry().missing_kinds()
    if missing:
        raise UnsupportedChartKindError(
            "No adapter for: " + ", ".join(k.value for k in missing)
        )
    logger.debug("%d chart kinds registered", get_registry().count)


def get_pipeline() -> ChartPipeline:
    global _pipeline
    with _pipeline_lock:
        if _pipeline is None:
            register_charts()
            _pipeline = ChartPipeline()
    return _pipeline


def generate(config: BaseChartConfig) -> Chart:
    """Points and orders for ``config``; orders always index into points."""
    return get_pipeline().run(config)
