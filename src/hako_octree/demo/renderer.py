# renderer.py
from typing import List
import numpy as np
import matplotlib.pyplot as plt
from matplotlib import patches
from matplotlib.colors import BoundaryNorm, ListedColormap
from hako_octree.model.models import Point3D
from hako_octree.model.sampling import points_to_array
from hako_octree.octree.analysis import iter_leaves
from hako_octree.octree.index import SpatialIndex

# 0 / 1 / 2-3 / 4+ 点
DENSITY_BOUNDS = [0, 1, 2, 4, 1_000_000]
DENSITY_COLORS = ["white", "green", "gold", "red"]

class ProjectionRenderer:
    def __init__(self, grid_size: int = 40, show_leaves: bool = True):
        self.grid_size = grid_size
        self.show_leaves = show_leaves

    def histogram(self, index: SpatialIndex, points: List[Point3D]):
        """XY 平面への投影ヒストグラム (grid_size x grid_size)"""
        b2d = index.bounds.to_2d()
        xyz = points_to_array(points)
        counts, xedges, yedges = np.histogram2d(
            xyz[:, 0], xyz[:, 1],
            bins=self.grid_size,
            range=[[b2d.xmin, b2d.xmax], [b2d.ymin, b2d.ymax]],
        )
        return counts, xedges, yedges

    def draw(self, index: SpatialIndex, points: List[Point3D], out: str | None = None):
        fig, ax = plt.subplots(figsize=(8,8), dpi=100)

        counts, xedges, yedges = self.histogram(index, points)
        cmap = ListedColormap(DENSITY_COLORS)
        norm = BoundaryNorm(DENSITY_BOUNDS, cmap.N)
        mesh = ax.pcolormesh(xedges, yedges, counts.T, cmap=cmap, norm=norm, zorder=1)

        # リーフの境界 (XY 投影)
        if self.show_leaves:
            for leaf in iter_leaves(index.root):
                r = leaf.bounds.to_2d()
                rect = patches.Rectangle(
                    (r.xmin, r.ymin), r.xmax - r.xmin, r.ymax - r.ymin,
                    linewidth=0.3, edgecolor="gray", facecolor="none", zorder=2
                )
                ax.add_patch(rect)

        # 軸・凡例
        s = index.get_stats()
        b2d = index.bounds.to_2d()
        ax.set_xlim(b2d.xmin, b2d.xmax)
        ax.set_ylim(b2d.ymin, b2d.ymax)
        ax.set_aspect("equal", adjustable="box")
        ax.set_xlabel("X")
        ax.set_ylabel("Y")
        ax.set_title(f"nodes={s.total_nodes} leaves={s.leaf_nodes} "
                     f"depth={s.max_depth} points={s.total_points}")
        cbar = plt.colorbar(mesh, ax=ax, fraction=0.035, pad=0.02, ticks=[0.5, 1.5, 3, 500_000])
        cbar.ax.set_yticklabels(["0", "1", "2-3", "4+"])
        cbar.set_label("points per cell")
        plt.tight_layout()
        if out:
            fig.savefig(out)
            plt.close(fig)
        else:
            plt.show()
        return fig
