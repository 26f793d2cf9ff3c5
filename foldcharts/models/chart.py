"""Chart — the (points, orders) pair produced by one generation call."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from foldcharts.models.shape import ChartKind, Order, Point, Size
from foldcharts.utils.geometry import (
    bbox,
    centroid,
    orders_to_array,
    out_of_range_links,
    points_to_array,
)


@dataclass
class Chart:
    kind: ChartKind
    complexity: int
    points: list[Point] = field(default_factory=list)
    orders: list[Order] = field(default_factory=list)

    @property
    def point_count(self) -> int:
        return len(self.points)

    @property
    def order_count(self) -> int:
        return len(self.orders)

    def to_arrays(self) -> tuple[NDArray[np.float64], NDArray[np.int64]]:
        """(Nx2 points, Mx2 links) for numpy consumers."""
        return points_to_array(self.points), orders_to_array(self.orders)

    def bounds(self) -> tuple[float, float, float, float]:
        return bbox(points_to_array(self.points))

    def size(self) -> Size:
        xmin, ymin, xmax, ymax = self.bounds()
        return Size(width=xmax - xmin, height=ymax - ymin)

    def center(self) -> tuple[float, float]:
        return centroid(points_to_array(self.points))

    def invalid_orders(self) -> list[int]:
        """Positions of orders whose link points past the end of points."""
        return [int(i) for i in out_of_range_links(orders_to_array(self.orders), len(self.points))]
