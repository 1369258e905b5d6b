from __future__ import annotations
import json
import logging
import pathlib
from typing import Any, Iterable, List

from jsonschema import validate

from .models import Point3D

logger = logging.getLogger(__name__)


class PointLoader:
    """JSONファイルを読み込んで点列にする共通ローダ"""

    def __init__(self, validate_schema: bool = True, schema_dir: str | pathlib.Path | None = None):
        self.validate_schema = validate_schema
        # デフォルト: このパッケージの schemas ディレクトリ
        if schema_dir is None:
            self.schema_dir = pathlib.Path(__file__).parent.parent / "schemas"
        else:
            self.schema_dir = pathlib.Path(schema_dir)

    def _load_json(self, path: str | pathlib.Path) -> Any:
        p = pathlib.Path(path)
        if not p.exists():
            raise FileNotFoundError(str(path))
        with open(p, "r", encoding="utf-8") as f:
            return json.load(f)

    def _validate(self, instance: Any, schema_name: str) -> None:
        if self.validate_schema:
            schema = self._load_json(self.schema_dir / schema_name)
            validate(instance=instance, schema=schema)

    # --- 公開API ------------------------------------------------------

    def load_points(self, path: str | pathlib.Path) -> List[Point3D]:
        """points.json → Point3D のリスト

        {"points": [{"x":..,"y":..,"z":..}, ...]} と {"points": [[x,y,z], ...]} の両方を受け付ける
        """
        data = self._load_json(path)
        self._validate(data, "points.schema.json")

        points: List[Point3D] = []
        for item in data["points"]:
            if isinstance(item, dict):
                points.append(Point3D(float(item["x"]), float(item["y"]), float(item["z"])))
            else:
                points.append(Point3D.from_iterable(item))
        logger.info("loaded %d points from %s", len(points), path)
        return points

    def save_points(self, path: str | pathlib.Path, points: Iterable[Point3D]) -> None:
        data = {"points": [{"x": p.x, "y": p.y, "z": p.z} for p in points]}
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
