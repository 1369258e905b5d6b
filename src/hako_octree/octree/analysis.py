# octree/analysis.py
from dataclasses import dataclass


@dataclass(frozen=True)
class TreeStats:
    total_nodes: int
    leaf_nodes: int
    max_depth: int
    total_points: int

    @property
    def internal_nodes(self) -> int:
        return self.total_nodes - self.leaf_nodes

    @property
    def avg_leaf_size(self) -> float:
        return self.total_points / self.leaf_nodes if self.leaf_nodes else 0.0

    @property
    def avg_branching_factor(self) -> float:
        if self.internal_nodes == 0:
            return 0.0
        return (self.total_nodes - 1) / self.internal_nodes

    def as_dict(self) -> dict:
        return {
            "total_nodes": self.total_nodes,
            "leaf_nodes": self.leaf_nodes,
            "internal_nodes": self.internal_nodes,
            "max_depth": self.max_depth,
            "total_points": self.total_points,
            "avg_leaf_size": round(self.avg_leaf_size, 3),
            "avg_branching_factor": round(self.avg_branching_factor, 3),
        }


def analyze_tree(root) -> TreeStats:
    """octree を全走査してノード数・リーフ数・最大深さ・点数を返す"""
    total_nodes = 0
    leaf_nodes = 0
    max_depth = 0
    total_points = 0

    def traverse(node):
        nonlocal total_nodes, leaf_nodes, max_depth, total_points
        total_nodes += 1
        max_depth = max(max_depth, node.depth)

        if node.is_leaf:
            leaf_nodes += 1
            total_points += len(node.points)
        else:
            for child in node.children:
                traverse(child)

    traverse(root)
    return TreeStats(total_nodes, leaf_nodes, max_depth, total_points)


def iter_leaves(root):
    """リーフノードを深さ優先で列挙（可視化用）"""
    if root.is_leaf:
        yield root
        return
    for child in root.children:
        yield from iter_leaves(child)
