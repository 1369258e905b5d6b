import pytest

from hako_octree.model.models import Point3D
from hako_octree.octree.analysis import TreeStats, iter_leaves
from hako_octree.octree.estimator import estimate_cost
from hako_octree.octree.index import SpatialIndex


def test_stats_after_one_subdivision(index: SpatialIndex) -> None:
    for i in range(5):
        index.insert(Point3D(10 + i, 10, 10))
    index.insert(Point3D(90, 90, 90))
    stats = index.get_stats()

    assert stats.total_nodes == 9
    assert stats.leaf_nodes == 8
    assert stats.internal_nodes == 1
    assert stats.max_depth == 1
    assert stats.total_points == 6
    assert stats.avg_branching_factor == pytest.approx(8.0)
    assert stats.avg_leaf_size == pytest.approx(6 / 8)


def test_leaves_hold_every_point(index: SpatialIndex) -> None:
    for i in range(40):
        index.insert(Point3D(i * 2.5, 100 - i * 2.5, i))
    assert sum(len(leaf.points) for leaf in iter_leaves(index.root)) == 40
    assert all(leaf.is_leaf for leaf in iter_leaves(index.root))


def test_as_dict_of_empty_stats() -> None:
    d = TreeStats(1, 1, 0, 0).as_dict()
    assert d["internal_nodes"] == 0
    assert d["avg_branching_factor"] == 0.0
    assert d["avg_leaf_size"] == 0.0


def test_estimate_cost() -> None:
    est = estimate_cost(num_points=5 * 8 ** 3, max_depth=8, threshold=5)
    assert est["estimated_depth"] == 3
    assert est["estimated_leaves"] == 512

    capped = estimate_cost(num_points=10 ** 9, max_depth=4, threshold=5)
    assert capped["estimated_depth"] == 4


def test_estimate_cost_degenerate() -> None:
    assert estimate_cost(0, 8, 5)["estimated_depth"] == 0
    assert estimate_cost(3, 8, 5)["estimated_depth"] == 0
