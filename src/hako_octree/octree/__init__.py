"""
octree 本体

- builder: OctreeNode（octant 振り分け、subdivide、insert）
- search: 枝刈り付き範囲探索と全点走査
- analysis: 全走査による統計
- estimator: 一様分布を仮定したコスト見積もり
- index: SpatialIndex（根ノードと固定パラメータの束ね）
"""
__all__ = ["analysis", "builder", "estimator", "index", "search"]
