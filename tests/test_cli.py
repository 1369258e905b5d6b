from pathlib import Path

from hako_octree.demo import cli
from hako_octree.demo.renderer import ProjectionRenderer
from hako_octree.demo import scenarios
from hako_octree.model.loader import PointLoader
from hako_octree.model.models import Point3D


def test_demo_command(capsys) -> None:
    assert cli.main(["--seed", "1", "demo", "-n", "200"]) == 0
    out = capsys.readouterr().out
    assert "points=200" in out


def test_validate_command(capsys) -> None:
    assert cli.main(["--seed", "1", "validate", "-n", "1000"]) == 0
    assert "[NG]" not in capsys.readouterr().out


def test_edge_command() -> None:
    assert cli.main(["--seed", "1", "--threshold", "8", "edge"]) == 0


def test_benchmark_command(capsys) -> None:
    assert cli.main(["--seed", "1", "benchmark", "--sizes", "100", "300"]) == 0
    out = capsys.readouterr().out
    assert "Speedup" in out


def test_query_command(tmp_path: Path, capsys) -> None:
    path = tmp_path / "points.json"
    PointLoader().save_points(path, [Point3D(40, 40, 40), Point3D(60, 60, 60)])
    code = cli.main(["query", str(path), "--min", "40", "40", "40", "--max", "50", "50", "50"])
    assert code == 0
    out = capsys.readouterr().out
    assert "hits: 1" in out
    assert "(40.000, 40.000, 40.000)" in out


def test_config_file_overridden_by_flags(tmp_path: Path) -> None:
    path = tmp_path / "cfg.json"
    path.write_text('{"max_depth": 2, "threshold": 3}', encoding="utf-8")
    args = cli.parse_args(["--config", str(path), "--threshold", "7", "demo"])
    cfg = cli.build_config(args)
    assert cfg.max_depth == 2
    assert cfg.threshold == 7


def test_plot_command_writes_file(tmp_path: Path) -> None:
    out = tmp_path / "projection.png"
    assert cli.main(["--seed", "1", "plot", "-n", "300", "--out", str(out)]) == 0
    assert out.exists()


def test_histogram_counts_every_point(config) -> None:
    index, points = scenarios.basic_demo(config, n=500)
    counts, _, _ = ProjectionRenderer(grid_size=20).histogram(index, points)
    assert counts.shape == (20, 20)
    assert counts.sum() == 500
