# octree/index.py
from __future__ import annotations
import logging
from typing import Iterable, List

from hako_octree.model.models import AABB3D, Point3D
from hako_octree.octree.analysis import TreeStats, analyze_tree
from hako_octree.octree.builder import DEFAULT_MAX_DEPTH, DEFAULT_THRESHOLD, OctreeNode
from hako_octree.octree.search import range_search

logger = logging.getLogger(__name__)


class SpatialIndex:
    """
    - universe bounds を覆う根ノードを 1 つ持つ octree
    - insert: 範囲外の点は黙って捨てる
    - range_query: 交差しない部分木を枝刈りして点を集める
    - get_stats: 全走査による統計
    max_depth / threshold は構築後に変更できない。
    """
    def __init__(
        self,
        bounds: AABB3D,
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
        threshold: int = DEFAULT_THRESHOLD
    ):
        if not bounds.is_valid():
            raise ValueError(f"universe bounds must satisfy min <= max, got {bounds}")
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")
        if threshold < 1:
            raise ValueError(f"threshold must be >= 1, got {threshold}")

        self._bounds = bounds
        self._max_depth = max_depth
        self._threshold = threshold
        self._root = OctreeNode(bounds=bounds, depth=0)
        self._count = 0

    @classmethod
    def from_config(cls, cfg) -> "SpatialIndex":
        return cls(cfg.universe(), max_depth=cfg.max_depth, threshold=cfg.threshold)

    @classmethod
    def from_file(cls, points_json_path: str, cfg) -> "SpatialIndex":
        from hako_octree.model.loader import PointLoader

        index = cls.from_config(cfg)
        points = PointLoader().load_points(points_json_path)
        stored = index.insert_many(points)
        logger.info("loaded %s: %d points, %d stored", points_json_path, len(points), stored)
        return index

    # --- 設定 ---

    @property
    def bounds(self) -> AABB3D:
        return self._bounds

    @property
    def max_depth(self) -> int:
        return self._max_depth

    @property
    def threshold(self) -> int:
        return self._threshold

    @property
    def root(self) -> OctreeNode:
        return self._root

    def __len__(self) -> int:
        return self._count

    # --- 更新 ---

    def insert(self, point: Point3D) -> bool:
        stored = self._root.insert(point, self._max_depth, self._threshold)
        if stored:
            self._count += 1
        else:
            logger.debug("dropped point outside universe: %s", point)
        return stored

    def insert_many(self, points: Iterable[Point3D]) -> int:
        stored = 0
        for p in points:
            if self.insert(p):
                stored += 1
        return stored

    # --- 検索 ---

    def range_query(self, box: AABB3D) -> List[Point3D]:
        return range_search(self._root, box)

    def get_stats(self) -> TreeStats:
        return analyze_tree(self._root)

    # ===== Debug / Inspect Utilities =====

    def debug_range(self, box: AABB3D):
        """
        範囲 box に対して：
          - 訪問ノード数 / 枝刈りノード数
          - ヒット数とヒットした点
        をまとめて返す。
        """
        stats = {"visited": 0, "pruned": 0}
        hits = range_search(self._root, box, stats=stats)
        return {
            "box": box,
            "visited_nodes": stats["visited"],
            "pruned_nodes": stats["pruned"],
            "hit_count": len(hits),
            "hits": hits,
        }

    def explain_range(self, box: AABB3D, *, max_listed: int = 10) -> str:
        """
        人間向けの複数行レポートを生成（ログ出力用）。
        """
        info = self.debug_range(box)
        mn, mx = box.min, box.max
        lines = []
        lines.append(
            f"[Octree] box=min({mn.x},{mn.y},{mn.z}) max({mx.x},{mx.y},{mx.z})  "
            f"visited={info['visited_nodes']} pruned={info['pruned_nodes']}"
        )
        if not info["hits"]:
            lines.append("[Octree] hits: none")
            return "\n".join(lines)

        lines.append(f"[Octree] hits: {info['hit_count']}")
        if info["hit_count"] <= max_listed:
            for p in info["hits"]:
                lines.append(f"  - ({p.x:.3f}, {p.y:.3f}, {p.z:.3f})")
        return "\n".join(lines)
