# octree/builder.py
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from hako_octree.model.models import AABB3D, Point3D

logger = logging.getLogger(__name__)

# 既定パラメータ
DEFAULT_MAX_DEPTH = 8
DEFAULT_THRESHOLD = 5


@dataclass
class OctreeNode:
    bounds: AABB3D
    depth: int = 0
    is_leaf: bool = True
    points: List[Point3D] = field(default_factory=list)
    children: Optional[List['OctreeNode']] = None  # subdivide 後は常に 8 個

    def midpoint(self) -> Point3D:
        return self.bounds.center()

    def determine_octant(self, p: Point3D) -> int:
        """bit2 = x, bit1 = y, bit0 = z。中点上の点は上側 (>=) に振り分ける"""
        mid = self.midpoint()
        octant = 0
        if p.x >= mid.x:
            octant |= 4
        if p.y >= mid.y:
            octant |= 2
        if p.z >= mid.z:
            octant |= 1
        return octant

    def subdivide(self, max_depth: int, threshold: int) -> None:
        if not self.is_leaf:
            return

        mid = self.midpoint()
        self.children = [
            OctreeNode(bounds=self.bounds.octant_box(i, mid), depth=self.depth + 1)
            for i in range(8)
        ]

        # 保持していた点を子へ再配置
        for p in self.points:
            self.children[self.determine_octant(p)].insert(p, max_depth, threshold)

        logger.debug("subdivided node depth=%d, redistributed %d points",
                     self.depth, len(self.points))
        self.points = []
        self.is_leaf = False

    def insert(self, p: Point3D, max_depth: int = DEFAULT_MAX_DEPTH,
               threshold: int = DEFAULT_THRESHOLD) -> bool:
        """点を挿入する。範囲外の点は黙って捨てて False を返す"""
        if not self.bounds.contains(p):
            return False

        if self.is_leaf:
            if self.depth >= max_depth or len(self.points) < threshold:
                self.points.append(p)
                return True
            self.subdivide(max_depth, threshold)

        return self.children[self.determine_octant(p)].insert(p, max_depth, threshold)


def build_octree(points, bounds: AABB3D, max_depth: int = DEFAULT_MAX_DEPTH,
                 threshold: int = DEFAULT_THRESHOLD) -> OctreeNode:
    """点列から octree を一括構築（逐次 insert と同じ結果になる）"""
    root = OctreeNode(bounds=bounds)
    dropped = 0
    for p in points:
        if not root.insert(p, max_depth, threshold):
            dropped += 1
    if dropped:
        logger.debug("dropped %d points outside %s", dropped, bounds)
    return root
