"""Tests for the shape value types."""

import math

import pytest
from pydantic import ValidationError

from foldcharts.models.shape import BaseChartConfig, ChartKind, Order, Point

ANGLES = [30.0, 45.0, 60.0, 90.0, -30.0, -45.0, -60.0, -90.0]


@pytest.mark.parametrize("degrees", ANGLES)
def test_rotation_about_origin(degrees):
    radian = math.radians(degrees)
    actual = Point(0.0, 0.0).rotate_by(Point(1.0, 0.0), radian)
    assert actual == Point(math.cos(radian), math.sin(radian))


@pytest.mark.parametrize("degrees", ANGLES)
def test_rotation_about_offset_anchor(degrees):
    radian = math.radians(degrees)
    origin = Point(1.5, 2.5)
    actual = origin.rotate_by(Point(1.0, 0.0), radian)
    assert actual == Point(1.5 + math.cos(radian), 2.5 + math.sin(radian))


def test_point_equality_is_tolerant():
    assert Point(0.1 + 0.2, 0.0) == Point(0.3, 0.0)
    assert Point(0.0, -0.0) == Point(0.0, 0.0)
    assert Point(0.0, 0.0) != Point(0.0, 1e-6)


def test_point_is_unhashable():
    with pytest.raises(TypeError):
        hash(Point(0.0, 0.0))


def test_point_vector_helpers():
    v = Point(3.0, 4.0) - Point(1.0, 1.0)
    assert v == Point(2.0, 3.0)
    assert v.scaled(-0.5) == Point(-1.0, -1.5)


def test_order_equality_is_by_link():
    assert Order(link=(1, 2)) == Order(link=(1, 2))
    assert Order(link=(1, 2)) != Order(link=(2, 1))


def test_config_defaults_leave_randomization_empty():
    config = BaseChartConfig(kind=ChartKind.STAR, complexity=5)
    assert config.mutation is None
    assert config.randomizer is None


def test_config_rejects_negative_complexity():
    with pytest.raises(ValidationError):
        BaseChartConfig(kind=ChartKind.STAR, complexity=-1)


def test_config_accepts_kind_by_value():
    config = BaseChartConfig(kind="koch_curve", complexity=3)
    assert config.kind is ChartKind.KOCH_CURVE
