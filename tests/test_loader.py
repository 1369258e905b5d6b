import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from hako_octree.demo.config import IndexConfig, load_json
from hako_octree.model.loader import PointLoader
from hako_octree.model.models import AABB3D, Point3D
from hako_octree.octree.index import SpatialIndex


def _write(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_dict_and_list_forms(tmp_path: Path) -> None:
    path = _write(tmp_path / "points.json", {
        "points": [{"x": 1, "y": 2, "z": 3}, [4.5, 5.5, 6.5]],
    })
    points = PointLoader().load_points(path)
    assert points == [Point3D(1, 2, 3), Point3D(4.5, 5.5, 6.5)]


def test_schema_violation_raises(tmp_path: Path) -> None:
    path = _write(tmp_path / "bad.json", {"points": [[1, 2]]})
    with pytest.raises(ValidationError):
        PointLoader().load_points(path)


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        PointLoader().load_points(tmp_path / "nope.json")


def test_save_then_build_index(tmp_path: Path) -> None:
    path = tmp_path / "points.json"
    PointLoader().save_points(path, [Point3D(10, 10, 10), Point3D(200, 0, 0)])

    index = SpatialIndex.from_file(str(path), IndexConfig())
    assert len(index) == 1
    assert index.range_query(AABB3D.from_bounds((0, 0, 0), (20, 20, 20))) == [Point3D(10, 10, 10)]


def test_load_json_config(tmp_path: Path) -> None:
    assert load_json(None) == {}
    path = _write(tmp_path / "cfg.json", {"max_depth": 3, "universe_max": [10, 10, 10]})
    cfg = IndexConfig(**load_json(str(path)))
    assert cfg.max_depth == 3
    assert cfg.universe() == AABB3D.from_bounds((0, 0, 0), (10, 10, 10))
    with pytest.raises(FileNotFoundError):
        load_json(str(tmp_path / "missing.json"))
