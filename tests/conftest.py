import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from hako_octree.demo.config import IndexConfig
from hako_octree.model.models import AABB3D
from hako_octree.octree.index import SpatialIndex

SEED = 42


@pytest.fixture(autouse=True)
def execute_before_every_test():
    np.random.seed(SEED)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(SEED)


@pytest.fixture
def universe() -> AABB3D:
    return AABB3D.from_bounds((0, 0, 0), (100, 100, 100))


@pytest.fixture
def index(universe: AABB3D) -> SpatialIndex:
    return SpatialIndex(universe, max_depth=8, threshold=5)


@pytest.fixture
def config() -> IndexConfig:
    return IndexConfig(seed=SEED)
