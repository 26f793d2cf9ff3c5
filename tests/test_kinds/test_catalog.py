"""Catalog-wide properties: every kind's points and orders agree."""

import pytest

from foldcharts.errors import MissingRandomizationError
from foldcharts.main import generate
from foldcharts.models.shape import BaseChartConfig, ChartKind, Randomizer
from foldcharts.registry import get_registry

RANDOMIZED = [
    ChartKind.BINARY_TREE,
    ChartKind.FOLD_C_CURVE,
    ChartKind.FOLD_DRAGON,
    ChartKind.KOCH_CURVE,
    ChartKind.KOCH_TRIANGLE_INNER,
    ChartKind.KOCH_TRIANGLE_OUTER,
    ChartKind.TRI_CIS,
    ChartKind.TRI_TRANS,
]
CLOSED_FORM = [k for k in ChartKind if k not in RANDOMIZED]


def _coords(points):
    return [(p.x, p.y) for p in points]


@pytest.mark.parametrize("kind", list(ChartKind))
@pytest.mark.parametrize("complexity", [2, 3, 4, 5])
def test_orders_index_into_points(make_config, kind, complexity):
    spec = get_registry().get(kind)
    points = spec.points(make_config(kind, complexity))
    orders = spec.orders(complexity)
    assert orders
    for a, b in (o.link for o in orders):
        assert 0 <= a < len(points)
        assert 0 <= b < len(points)


@pytest.mark.parametrize("kind", list(ChartKind))
@pytest.mark.parametrize("complexity", [2, 3, 4])
def test_order_count_matches_point_count(make_config, kind, complexity):
    spec = get_registry().get(kind)
    n = len(spec.points(make_config(kind, complexity)))
    m = len(spec.orders(complexity))
    if kind in (ChartKind.CLOVER, ChartKind.STARMINE, ChartKind.STAR, ChartKind.SUNRISE, ChartKind.SUNSET):
        assert m == n
    else:
        # Open paths and trees have one link fewer than points
        assert m == n - 1


@pytest.mark.parametrize("kind", RANDOMIZED)
def test_same_seeds_same_points(make_config, noisy_randomizer, kind):
    config = make_config(kind, 4, randomizer=noisy_randomizer)
    first = generate(config)
    second = generate(config)
    assert _coords(first.points) == _coords(second.points)


@pytest.mark.parametrize("kind", RANDOMIZED)
def test_seeds_change_the_shape(make_config, noisy_randomizer, kind):
    still = generate(make_config(kind, 4))
    noisy = generate(make_config(kind, 4, randomizer=noisy_randomizer))
    assert noisy.point_count == still.point_count
    assert _coords(noisy.points) != _coords(still.points)


@pytest.mark.parametrize("kind", RANDOMIZED)
@pytest.mark.parametrize("seed", [0, 1, 12345])
def test_zero_amplitude_ignores_seed(make_config, kind, seed):
    reference = generate(make_config(kind, 4))
    seeded = Randomizer(size_amplitude=0.0, size_seed=seed, angle_amplitude=0.0, angle_seed=seed + 1)
    actual = generate(make_config(kind, 4, randomizer=seeded))
    assert _coords(actual.points) == _coords(reference.points)


@pytest.mark.parametrize("kind", RANDOMIZED)
def test_randomized_kinds_require_mutation(kind):
    spec = get_registry().get(kind)
    assert spec.requires_randomization
    with pytest.raises(MissingRandomizationError):
        spec.points(BaseChartConfig(kind=kind, complexity=3))


@pytest.mark.parametrize("kind", CLOSED_FORM)
def test_closed_form_kinds_need_no_mutation(kind):
    chart = generate(BaseChartConfig(kind=kind, complexity=6))
    assert not get_registry().get(kind).requires_randomization
    assert chart.point_count > 0
