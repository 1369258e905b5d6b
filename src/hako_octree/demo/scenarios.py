# scenarios.py
"""
デモ / 検証シナリオ
-----------------------------------
SpatialIndex の insert / range_query / get_stats だけを使って、
  - 基本デモ（一様乱数点の挿入）
  - 全点走査とのベンチマーク
  - 全点走査との結果一致検証
  - 境界・極端ケース
を実行する。
"""
from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from hako_octree.model.models import AABB3D, Point3D
from hako_octree.model.sampling import (
    clustered_points,
    linear_scan_array,
    points_to_array,
    same_points,
    uniform_points,
)
from hako_octree.octree.analysis import TreeStats
from hako_octree.octree.index import SpatialIndex
from hako_octree.octree.search import linear_scan
from .config import IndexConfig

logger = logging.getLogger(__name__)

DEFAULT_QUERY = AABB3D.from_bounds((40, 40, 40), (60, 60, 60))
DEFAULT_SIZES = (10_000, 50_000, 100_000, 200_000)
DEFAULT_RANGES: Tuple[Tuple[Tuple[float, float, float], Tuple[float, float, float]], ...] = (
    ((40, 40, 40), (60, 60, 60)),
    ((0, 0, 0), (25, 25, 25)),
    ((75, 75, 75), (100, 100, 100)),
    ((25, 25, 25), (75, 75, 75)),
    ((45, 45, 45), (55, 55, 55)),
)


@dataclass(frozen=True)
class BenchmarkRow:
    n: int
    octree_ms: float
    naive_ms: float
    hits: int

    @property
    def speedup(self) -> float:
        return self.naive_ms / max(self.octree_ms, 1e-3)


@dataclass(frozen=True)
class ValidationResult:
    box: AABB3D
    octree_hits: int
    naive_hits: int
    passed: bool


@dataclass(frozen=True)
class EdgeCaseReport:
    empty_query_hits: int
    corner_hits: int
    dense_stats: TreeStats


def _rng(cfg: IndexConfig) -> np.random.Generator:
    return np.random.default_rng(cfg.seed)


def basic_demo(cfg: IndexConfig, n: int = 1000) -> Tuple[SpatialIndex, List[Point3D]]:
    index = SpatialIndex.from_config(cfg)
    points = uniform_points(n, index.bounds, _rng(cfg))
    index.insert_many(points)
    logger.info("basic demo: inserted %d points, %s", len(index), index.get_stats().as_dict())
    return index, points


def benchmark(cfg: IndexConfig, sizes: Sequence[int] = DEFAULT_SIZES,
              query: AABB3D = DEFAULT_QUERY) -> List[BenchmarkRow]:
    rng = _rng(cfg)
    rows: List[BenchmarkRow] = []
    for n in sizes:
        index = SpatialIndex.from_config(cfg)
        points = uniform_points(n, index.bounds, rng)
        index.insert_many(points)
        xyz = points_to_array(points)

        t0 = time.perf_counter()
        hits = index.range_query(query)
        t1 = time.perf_counter()
        linear_scan_array(xyz, query)
        t2 = time.perf_counter()

        rows.append(BenchmarkRow(n=n, octree_ms=(t1 - t0) * 1000.0,
                                 naive_ms=(t2 - t1) * 1000.0, hits=len(hits)))
        logger.info("benchmark n=%d hits=%d", n, len(hits))
    return rows


def validate(cfg: IndexConfig, n: int = 50_000,
             ranges: Optional[Sequence[Tuple[Sequence[float], Sequence[float]]]] = None) -> List[ValidationResult]:
    index = SpatialIndex.from_config(cfg)
    points = uniform_points(n, index.bounds, _rng(cfg))
    index.insert_many(points)

    results: List[ValidationResult] = []
    for mn, mx in ranges or DEFAULT_RANGES:
        box = AABB3D.from_bounds(mn, mx)
        got = index.range_query(box)
        expected = linear_scan(points, box)
        results.append(ValidationResult(
            box=box, octree_hits=len(got), naive_hits=len(expected),
            passed=same_points(got, expected),
        ))
    return results


def corner_points(bounds: AABB3D) -> List[Point3D]:
    mn, mx = bounds.min, bounds.max
    return [
        Point3D(x, y, z)
        for x in (mn.x, mx.x)
        for y in (mn.y, mx.y)
        for z in (mn.z, mx.z)
    ]


def edge_cases(cfg: IndexConfig, dense_points: int = 10_000) -> EdgeCaseReport:
    # 1: 空の octree
    empty = SpatialIndex.from_config(cfg)
    empty_hits = len(empty.range_query(DEFAULT_QUERY))

    # 2: universe の 8 隅
    corners = SpatialIndex.from_config(cfg)
    corners.insert_many(corner_points(corners.bounds))
    corner_hits = len(corners.range_query(corners.bounds))

    # 3: 中心付近 2x2x2 に高密度
    dense = SpatialIndex.from_config(cfg)
    dense.insert_many(clustered_points(dense_points, dense.bounds.center(), 1.0, _rng(cfg)))
    stats = dense.get_stats()
    logger.info("dense cluster: %s", stats.as_dict())

    return EdgeCaseReport(empty_query_hits=empty_hits, corner_hits=corner_hits, dense_stats=stats)
