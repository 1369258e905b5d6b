# octree/search.py
from typing import Dict, List, Optional

from hako_octree.model.models import AABB3D, Point3D


def range_search(node, box: AABB3D, found: Optional[List[Point3D]] = None,
                 stats: Optional[Dict[str, int]] = None) -> List[Point3D]:
    if found is None:
        found = []
    if stats is None:
        stats = {"visited": 0, "pruned": 0}

    stats["visited"] += 1
    # 交差しない部分木は子も点も見ない
    if not node.bounds.intersects(box):
        stats["pruned"] += 1
        return found

    if node.is_leaf:
        for p in node.points:
            if box.contains(p):
                found.append(p)
        return found

    for child in node.children:
        range_search(child, box, found, stats)

    return found


def linear_scan(points, box: AABB3D) -> List[Point3D]:
    """全点走査による基準実装（検証・ベンチマーク用）"""
    return [p for p in points if box.contains(p)]
