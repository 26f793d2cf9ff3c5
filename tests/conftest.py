"""Shared test fixtures."""

from __future__ import annotations

import pytest

from foldcharts.main import register_charts
from foldcharts.models.shape import BaseChartConfig, ChartKind, Mutation, Randomizer


@pytest.fixture(scope="session", autouse=True)
def _charts_registered() -> None:
    register_charts()


@pytest.fixture
def unit_mutation() -> Mutation:
    return Mutation(size=1.0, angle=1.0)


@pytest.fixture
def still_randomizer() -> Randomizer:
    """Zero amplitude: every draw is exactly 0."""
    return Randomizer(size_amplitude=0.0, size_seed=0, angle_amplitude=0.0, angle_seed=0)


@pytest.fixture
def noisy_randomizer() -> Randomizer:
    return Randomizer(size_amplitude=0.2, size_seed=7, angle_amplitude=0.3, angle_seed=11)


@pytest.fixture
def make_config(unit_mutation: Mutation, still_randomizer: Randomizer):
    """Factory: nominal-geometry config for any kind and complexity."""

    def _make(kind: ChartKind, complexity: int, **overrides) -> BaseChartConfig:
        fields = {
            "kind": kind,
            "complexity": complexity,
            "mutation": unit_mutation,
            "randomizer": still_randomizer,
        }
        fields.update(overrides)
        return BaseChartConfig(**fields)

    return _make
