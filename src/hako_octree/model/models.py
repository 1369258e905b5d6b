from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Tuple

Vec3 = Tuple[float, float, float]

# 座標比較の許容誤差
EPSILON = 1e-9


# --- 幾何 -------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class Point3D:
    x: float
    y: float
    z: float

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point3D):
            return NotImplemented
        return (
            abs(self.x - other.x) < EPSILON and
            abs(self.y - other.y) < EPSILON and
            abs(self.z - other.z) < EPSILON
        )

    # approximate equality cannot be hashed consistently
    __hash__ = None  # type: ignore[assignment]

    def as_tuple(self) -> Vec3:
        return (self.x, self.y, self.z)

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Point3D":
        x, y, z = (float(v) for v in values)
        return cls(x, y, z)


@dataclass(frozen=True)
class AABB3D:
    """Axis-Aligned Bounding Box (3D)

    min <= max on every axis is a precondition of the caller.
    """
    min: Point3D
    max: Point3D

    def width(self) -> float:
        return self.max.x - self.min.x

    def height(self) -> float:
        return self.max.y - self.min.y

    def depth(self) -> float:
        return self.max.z - self.min.z

    def volume(self) -> float:
        return self.width() * self.height() * self.depth()

    def center(self) -> Point3D:
        return Point3D(
            (self.min.x + self.max.x) / 2.0,
            (self.min.y + self.max.y) / 2.0,
            (self.min.z + self.max.z) / 2.0,
        )

    def is_valid(self) -> bool:
        return (
            self.min.x <= self.max.x and
            self.min.y <= self.max.y and
            self.min.z <= self.max.z
        )

    def contains(self, p: Point3D) -> bool:
        """6面すべて境界を含む"""
        return (
            self.min.x <= p.x <= self.max.x and
            self.min.y <= p.y <= self.max.y and
            self.min.z <= p.z <= self.max.z
        )

    def intersects(self, other: "AABB3D") -> bool:
        return (
            self.min.x <= other.max.x and self.max.x >= other.min.x and
            self.min.y <= other.max.y and self.max.y >= other.min.y and
            self.min.z <= other.max.z and self.max.z >= other.min.z
        )

    def octant_box(self, index: int, mid: Point3D) -> "AABB3D":
        """octant 番号 (bit2=x, bit1=y, bit0=z, 1=上半分) の子ボックス"""
        return AABB3D(
            min=Point3D(
                mid.x if index & 4 else self.min.x,
                mid.y if index & 2 else self.min.y,
                mid.z if index & 1 else self.min.z,
            ),
            max=Point3D(
                self.max.x if index & 4 else mid.x,
                self.max.y if index & 2 else mid.y,
                self.max.z if index & 1 else mid.z,
            ),
        )

    def to_2d(self) -> "AABB2D":
        return AABB2D(xmin=self.min.x, ymin=self.min.y, xmax=self.max.x, ymax=self.max.y)

    @classmethod
    def from_bounds(cls, mn: Iterable[float], mx: Iterable[float]) -> "AABB3D":
        return cls(min=Point3D.from_iterable(mn), max=Point3D.from_iterable(mx))


@dataclass(frozen=True)
class AABB2D:
    """2D 用の矩形（可視化で利用）"""
    xmin: float
    ymin: float
    xmax: float
    ymax: float

    def center(self) -> Tuple[float, float]:
        return ((self.xmin + self.xmax) * 0.5, (self.ymin + self.ymax) * 0.5)


__all__ = [
    "EPSILON",
    "Point3D",
    "AABB3D",
    "AABB2D",
    "Vec3",
]
