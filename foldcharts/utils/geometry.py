"""Leaf-node numpy helpers over point and order lists. No engine imports."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from foldcharts.models.shape import Order, Point


def points_to_array(points: Sequence[Point]) -> NDArray[np.float64]:
    """Nx2 float array of (x, y)."""
    if len(points) == 0:
        return np.empty((0, 2), dtype=np.float64)
    return np.array([(p.x, p.y) for p in points], dtype=np.float64)


def orders_to_array(orders: Sequence[Order]) -> NDArray[np.int64]:
    """Mx2 int array of (from, to) indices."""
    if len(orders) == 0:
        return np.empty((0, 2), dtype=np.int64)
    return np.array([o.link for o in orders], dtype=np.int64)


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def centroid(points: NDArray[np.float64]) -> tuple[float, float]:
    if len(points) == 0:
        return (0.0, 0.0)
    return (float(np.mean(points[:, 0])), float(np.mean(points[:, 1])))


def link_lengths(points: NDArray[np.float64], links: NDArray[np.int64]) -> NDArray[np.float64]:
    """Euclidean length of every link."""
    if len(links) == 0:
        return np.empty(0, dtype=np.float64)
    diffs = points[links[:, 1]] - points[links[:, 0]]
    return np.sqrt(np.sum(diffs**2, axis=1))


def out_of_range_links(links: NDArray[np.int64], point_count: int) -> NDArray[np.int64]:
    """Row indices of links that reference a missing point."""
    if len(links) == 0:
        return np.empty(0, dtype=np.int64)
    bad = np.any((links < 0) | (links >= point_count), axis=1)
    return np.flatnonzero(bad)
