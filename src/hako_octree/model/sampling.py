from __future__ import annotations
from typing import List, Optional, Sequence

import numpy as np

from .models import AABB3D, Point3D


def _rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def uniform_points(n: int, bounds: AABB3D, rng: Optional[np.random.Generator] = None) -> List[Point3D]:
    """bounds 内の一様乱数点"""
    lo = np.array(bounds.min.as_tuple())
    hi = np.array(bounds.max.as_tuple())
    xyz = _rng(rng).uniform(lo, hi, size=(n, 3))
    return [Point3D(float(x), float(y), float(z)) for x, y, z in xyz]


def clustered_points(n: int, center: Point3D, half_extent: float,
                     rng: Optional[np.random.Generator] = None) -> List[Point3D]:
    """center を中心とする一辺 2*half_extent の立方体内に密集させた点"""
    c = np.array(center.as_tuple())
    xyz = _rng(rng).uniform(c - half_extent, c + half_extent, size=(n, 3))
    return [Point3D(float(x), float(y), float(z)) for x, y, z in xyz]


def points_to_array(points: Sequence[Point3D]) -> np.ndarray:
    if not points:
        return np.empty((0, 3), dtype=float)
    return np.array([p.as_tuple() for p in points], dtype=float)


def linear_scan_array(xyz: np.ndarray, box: AABB3D) -> np.ndarray:
    """(N, 3) 配列に対する全点走査。境界は含む"""
    lo = np.array(box.min.as_tuple())
    hi = np.array(box.max.as_tuple())
    mask = np.all((xyz >= lo) & (xyz <= hi), axis=1)
    return xyz[mask]


def same_points(a: Sequence[Point3D], b: Sequence[Point3D]) -> bool:
    """順序を無視した多重集合としての比較（近似一致）"""
    if len(a) != len(b):
        return False
    sa = sorted(a, key=Point3D.as_tuple)
    sb = sorted(b, key=Point3D.as_tuple)
    return all(p == q for p, q in zip(sa, sb))
