"""Shape value types and the chart request model."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from pydantic import BaseModel, Field

from foldcharts.config import limits


@dataclass(frozen=True, eq=False)
class Point:
    x: float
    y: float

    def rotate_by(self, vector: Point, radian: float) -> Point:
        """Return self + vector rotated counter-clockwise by radian."""
        sin = math.sin(radian)
        cos = math.cos(radian)
        return Point(
            x=self.x + vector.x * cos - vector.y * sin,
            y=self.y + vector.x * sin + vector.y * cos,
        )

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def scaled(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)

    def __eq__(self, other: object) -> bool:
        # Chained float transforms drift by a few ulps
        if not isinstance(other, Point):
            return NotImplemented
        tol = limits.point_tolerance
        return abs(self.x - other.x) < tol and abs(self.y - other.y) < tol

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class Order:
    """Directed pen/thread link between two point indices."""

    link: tuple[int, int]


@dataclass(frozen=True)
class Size:
    width: float
    height: float


class ChartKind(str, enum.Enum):
    BINARY_TREE = "binary_tree"
    CLOVER = "clover"
    FOLD_C_CURVE = "fold_c_curve"
    FOLD_DRAGON = "fold_dragon"
    KOCH_CURVE = "koch_curve"
    KOCH_TRIANGLE_INNER = "koch_triangle_inner"
    KOCH_TRIANGLE_OUTER = "koch_triangle_outer"
    STAR = "star"
    STARMINE = "starmine"
    SUNRISE = "sunrise"
    SUNSET = "sunset"
    TRI_CIS = "tri_cis"
    TRI_TRANS = "tri_trans"


class Mutation(BaseModel):
    size: float = Field(default=1.0, description="Bias added to every length draw")
    angle: float = Field(default=1.0, description="Bias added to every angle draw")


class Randomizer(BaseModel):
    size_amplitude: float = Field(default=0.0, description="Scale of length draws")
    size_seed: int = Field(default=0, ge=0, description="Seed of the length stream")
    angle_amplitude: float = Field(default=0.0, description="Scale of angle draws")
    angle_seed: int = Field(default=0, ge=0, description="Seed of the angle stream")


class BaseChartConfig(BaseModel):
    kind: ChartKind = Field(..., description="Chart family to generate")
    complexity: int = Field(..., ge=0, description="Recursion depth / point density")
    mutation: Mutation | None = Field(
        default=None,
        description="Required by fold kinds and the binary tree",
    )
    randomizer: Randomizer | None = Field(
        default=None,
        description="Required by fold kinds and the binary tree",
    )
