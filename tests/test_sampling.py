import numpy as np

from hako_octree.model.models import AABB3D, Point3D
from hako_octree.model.sampling import (
    clustered_points,
    linear_scan_array,
    points_to_array,
    same_points,
    uniform_points,
)


def test_uniform_points_stay_in_bounds(universe: AABB3D, rng: np.random.Generator) -> None:
    points = uniform_points(1000, universe, rng)
    assert len(points) == 1000
    assert all(universe.contains(p) for p in points)


def test_clustered_points_stay_in_cube(rng: np.random.Generator) -> None:
    cube = AABB3D.from_bounds((49, 49, 49), (51, 51, 51))
    points = clustered_points(500, Point3D(50, 50, 50), 1.0, rng)
    assert all(cube.contains(p) for p in points)


def test_linear_scan_array_is_inclusive() -> None:
    xyz = points_to_array([Point3D(0, 0, 0), Point3D(5, 5, 5), Point3D(6, 5, 5)])
    hits = linear_scan_array(xyz, AABB3D.from_bounds((0, 0, 0), (5, 5, 5)))
    np.testing.assert_array_equal(hits, [[0, 0, 0], [5, 5, 5]])


def test_points_to_array_empty() -> None:
    assert points_to_array([]).shape == (0, 3)


def test_same_points_ignores_order_not_multiplicity() -> None:
    a = [Point3D(1, 1, 1), Point3D(2, 2, 2), Point3D(1, 1, 1)]
    assert same_points(a, list(reversed(a)))
    assert not same_points(a, [Point3D(1, 1, 1), Point3D(2, 2, 2), Point3D(2, 2, 2)])
    assert not same_points(a, a[:2])
