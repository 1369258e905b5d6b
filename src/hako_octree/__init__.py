"""
hako_octree: 3D 点群の octree 空間インデックス

- model: Point3D / AABB3D と点群ローダ
- octree: ノード構造、範囲探索、統計
- demo: デモシナリオ、ベンチマーク、可視化、CLI
"""
from hako_octree.model.models import AABB3D, Point3D
from hako_octree.octree.analysis import TreeStats
from hako_octree.octree.index import SpatialIndex

__all__ = ["AABB3D", "Point3D", "SpatialIndex", "TreeStats"]

__version__ = "0.1.0"
