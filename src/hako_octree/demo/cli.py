# cli.py
import argparse
import logging
import sys
from .config import IndexConfig, load_json
from .renderer import ProjectionRenderer
from . import scenarios
from hako_octree.model.models import AABB3D
from hako_octree.octree.estimator import estimate_cost
from hako_octree.octree.index import SpatialIndex

CONFIG_KEYS = ("max_depth", "threshold", "seed", "grid_size")

def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="hako-octree")
    p.add_argument("--config")
    p.add_argument("--max-depth", dest="max_depth", type=int)
    p.add_argument("--threshold", type=int)
    p.add_argument("--seed", type=int)
    p.add_argument("--grid-size", dest="grid_size", type=int)
    p.add_argument("--log-level", default="WARNING")

    sub = p.add_subparsers(dest="command", required=True)

    demo = sub.add_parser("demo", help="insert random points and print stats")
    demo.add_argument("-n", type=int, default=1000)

    bench = sub.add_parser("benchmark", help="octree vs linear scan")
    bench.add_argument("--sizes", type=int, nargs="+", default=list(scenarios.DEFAULT_SIZES))

    val = sub.add_parser("validate", help="cross-check range queries with a linear scan")
    val.add_argument("-n", type=int, default=50_000)

    sub.add_parser("edge", help="empty / corner / dense-cluster cases")

    query = sub.add_parser("query", help="range query over a points JSON file")
    query.add_argument("points")
    query.add_argument("--min", type=float, nargs=3, required=True)
    query.add_argument("--max", type=float, nargs=3, required=True)

    plot = sub.add_parser("plot", help="XY projection of random points")
    plot.add_argument("-n", type=int, default=1000)
    plot.add_argument("--out")

    return p.parse_args(argv)

def build_config(args) -> IndexConfig:
    cfg_dict = load_json(args.config)
    # JSONをデフォルトに、CLIで上書き
    for k in CONFIG_KEYS:
        v = getattr(args, k)
        if v is not None: cfg_dict[k] = v
    return IndexConfig(**cfg_dict)

def print_stats(index: SpatialIndex):
    s = index.get_stats()
    print(f"[Octree] nodes={s.total_nodes} leaves={s.leaf_nodes} internal={s.internal_nodes} "
          f"max_depth={s.max_depth} points={s.total_points}")
    print(f"[Octree] avg_leaf_size={s.avg_leaf_size:.2f} avg_branching={s.avg_branching_factor:.2f}")

def run_demo(cfg, args):
    index, _ = scenarios.basic_demo(cfg, n=args.n)
    print_stats(index)
    print("[Octree] estimate:", estimate_cost(len(index), index.max_depth, index.threshold))
    return 0

def run_benchmark(cfg, args):
    rows = scenarios.benchmark(cfg, sizes=args.sizes)
    print(f"{'N':>12}{'Octree (ms)':>15}{'Naive (ms)':>15}{'Speedup':>15}{'Points':>15}")
    print("-" * 72)
    for r in rows:
        print(f"{r.n:>12}{r.octree_ms:>15.2f}{r.naive_ms:>15.2f}{r.speedup:>14.1f}x{r.hits:>15}")
    return 0

def run_validate(cfg, args):
    results = scenarios.validate(cfg, n=args.n)
    ok = True
    for i, r in enumerate(results, 1):
        label = f"[{r.box.min.x:g}-{r.box.max.x:g}]"
        if r.passed:
            print(f"[OK] test {i} {label}: {r.octree_hits} points")
        else:
            print(f"[NG] test {i} {label}: octree={r.octree_hits} naive={r.naive_hits}")
            ok = False
    return 0 if ok else 1

def run_edge(cfg, args):
    rep = scenarios.edge_cases(cfg)
    print(f"[Octree] empty query hits: {rep.empty_query_hits}")
    print(f"[Octree] corner hits: {rep.corner_hits} / 8")
    s = rep.dense_stats
    print(f"[Octree] dense: points={s.total_points} nodes={s.total_nodes} max_depth={s.max_depth}")
    return 0 if rep.empty_query_hits == 0 and rep.corner_hits == 8 else 1

def run_query(cfg, args):
    index = SpatialIndex.from_file(args.points, cfg)
    box = AABB3D.from_bounds(args.min, args.max)
    print(index.explain_range(box))
    return 0

def run_plot(cfg, args):
    index, points = scenarios.basic_demo(cfg, n=args.n)
    ProjectionRenderer(grid_size=cfg.grid_size).draw(index, points, out=args.out)
    return 0

COMMANDS = {
    "demo": run_demo,
    "benchmark": run_benchmark,
    "validate": run_validate,
    "edge": run_edge,
    "query": run_query,
    "plot": run_plot,
}

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    cfg = build_config(args)
    return COMMANDS[args.command](cfg, args)

if __name__ == "__main__":
    sys.exit(main())
