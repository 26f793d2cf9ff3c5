"""Tests for the closed-form adapters: clover, starmine, star, sunrise, sunset."""

import math

from foldcharts.kinds import clover, star, starmine
from foldcharts.models.shape import ChartKind, Order, Point

SQRT3_2 = math.sqrt(3.0) / 2.0


def test_clover_points(make_config):
    actual = clover.generate_base_points(make_config(ChartKind.CLOVER, 3))
    expect = [
        Point(-0.0, -0.0),
        Point(-0.1562200770427064, -0.008187147317233846),
        Point(-0.3073241669467797, -0.03230107154560245),
        Point(-0.44840112333371024, -0.07101976096010312),
        Point(-0.5749407342765973, -0.12220742564187133),
        Point(-0.6830127018922192, -0.1830127018922195),
        Point(-0.7694208842938134, -0.25000000000000006),
    ]
    assert len(actual) == 120
    assert actual[:7] == expect


def test_clover_orders_close_the_loop():
    orders = clover.generate_orders(3)
    assert len(orders) == 120
    assert orders[0] == Order(link=(0, 1))
    assert orders[-1] == Order(link=(119, 0))


def test_clover_ignores_randomization(make_config, noisy_randomizer):
    plain = clover.generate_base_points(make_config(ChartKind.CLOVER, 2))
    noisy = clover.generate_base_points(make_config(ChartKind.CLOVER, 2, randomizer=noisy_randomizer))
    assert plain == noisy


def test_starmine_points(make_config):
    actual = starmine.generate_base_points(make_config(ChartKind.STARMINE, 3))
    pi = math.pi
    expect = [
        Point(math.cos(-pi), math.sin(-pi)),
        Point(math.cos(-2 * pi / 3) / 4, math.sin(-2 * pi / 3) / 4),
        Point(math.cos(-pi / 3), math.sin(-pi / 3)),
        Point(0.25, 0.0),
        Point(math.cos(pi / 3), math.sin(pi / 3)),
        Point(math.cos(2 * pi / 3) / 4, math.sin(2 * pi / 3) / 4),
    ]
    assert actual == expect


def test_starmine_orders():
    assert starmine.generate_orders(3) == [Order(link=(i, (i + 1) % 6)) for i in range(6)]


def test_star_points(make_config):
    actual = star.star_points(make_config(ChartKind.STAR, 3))
    assert actual == [Point(0.0, 1.0), Point(SQRT3_2, -0.5), Point(-SQRT3_2, -0.5)]


def test_star_orders():
    assert star.star_orders(3) == [Order(link=(0, 2)), Order(link=(2, 1)), Order(link=(1, 0))]


def test_sunrise_points_match_star(make_config):
    assert star.fan_points(make_config(ChartKind.SUNRISE, 3)) == star.star_points(
        make_config(ChartKind.STAR, 3)
    )


def test_sunset_is_sunrise_mirrored(make_config):
    sunrise = star.fan_points(make_config(ChartKind.SUNRISE, 9))
    sunset = star.fan_points(make_config(ChartKind.SUNSET, 9))
    assert sunset == [Point(p.x, -p.y) for p in sunrise]
    assert sunset[0] == Point(0.0, -1.0)


def test_fan_orders():
    assert star.fan_orders(5) == [
        Order(link=(0, 2)),
        Order(link=(1, 4)),
        Order(link=(2, 1)),
        Order(link=(3, 3)),
        Order(link=(4, 0)),
    ]


def test_zero_complexity_is_empty(make_config):
    assert star.star_points(make_config(ChartKind.STAR, 0)) == []
    assert star.star_orders(0) == []
    assert clover.generate_base_points(make_config(ChartKind.CLOVER, 0)) == []
    assert clover.generate_orders(0) == []
