"""Tests for complexity clamping."""

import logging

import pytest

from foldcharts.config import clamp_complexity, limits


@pytest.mark.parametrize("complexity,expected", [(0, 2), (2, 2), (5, 5), (10, 10), (99, 10)])
def test_clamp_complexity(complexity, expected):
    assert clamp_complexity(complexity, limits.binary_tree_complexity) == expected


def test_clamp_logs_adjustment(caplog):
    caplog.set_level(logging.DEBUG, logger="foldcharts.config")
    clamp_complexity(40, (2, 8))
    assert "clamped to 8" in caplog.text


def test_clamp_is_silent_within_bounds(caplog):
    caplog.set_level(logging.DEBUG, logger="foldcharts.config")
    clamp_complexity(5, (2, 8))
    assert "clamped" not in caplog.text
