"""Order generators — connectivity from a point count and a topology kind."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from foldcharts.models.shape import Order


class OrderKind(enum.Enum):
    LOOP = "loop"
    START_END_2X_FASTER = "start_end_2x_faster"
    END_2X_FASTER = "end_2x_faster"
    LINEAR = "linear"


@dataclass(frozen=True)
class OrderConfig:
    kind: OrderKind
    point_count: int


def generate_orders(config: OrderConfig) -> list[Order]:
    """Build 0-indexed links for ``config.point_count`` points.

    LINEAR    (i, i+1)                 n-1 links, no wraparound
    LOOP      (i, (i+1) % n)           n links, closes back to 0
    START_END_2X_FASTER  (2i % n, 2(i+1) % n)
    END_2X_FASTER        (i, 2(i+1) % n)   self-loops occur for even n
    """
    n = config.point_count
    kind = config.kind

    if kind is OrderKind.LINEAR:
        return [Order(link=(i, i + 1)) for i in range(max(n - 1, 0))]
    if kind is OrderKind.LOOP:
        return [Order(link=(i, (i + 1) % n)) for i in range(n)]
    if kind is OrderKind.START_END_2X_FASTER:
        return [Order(link=((2 * i) % n, (2 * (i + 1)) % n)) for i in range(n)]
    if kind is OrderKind.END_2X_FASTER:
        return [Order(link=(i, (2 * (i + 1)) % n)) for i in range(n)]
    raise ValueError(f"Unknown order kind: {kind}")
