# config.py
from dataclasses import dataclass, field
from pathlib import Path
import json

from hako_octree.model.models import AABB3D
from hako_octree.octree.builder import DEFAULT_MAX_DEPTH, DEFAULT_THRESHOLD

@dataclass
class IndexConfig:
    universe_min: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    universe_max: list[float] = field(default_factory=lambda: [100.0, 100.0, 100.0])
    max_depth: int = DEFAULT_MAX_DEPTH
    threshold: int = DEFAULT_THRESHOLD
    seed: int | None = None
    grid_size: int = 40

    def universe(self) -> AABB3D:
        return AABB3D.from_bounds(self.universe_min, self.universe_max)

def load_json(path: str | None) -> dict:
    if not path: return {}
    p = Path(path)
    if not p.exists(): raise FileNotFoundError(path)
    with p.open("r", encoding="utf-8") as f: return json.load(f)
