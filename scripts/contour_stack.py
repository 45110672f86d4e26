"""Build a contour stack from hand-drawn outlines and mesh it.

Outlines are fed point by point through :class:`contour2d.ContourBuilder`
(rejected points are reported), stacked into a
:class:`surface3d.Structure` and turned into a surface.  The left panel
shows the raster mask of the lowest plane, the right panel the mesh.

Usage::

    python scripts/contour_stack.py                     # saves contour_stack.png
    python scripts/contour_stack.py --out stack.png --min-res 80

Requirements: numpy, matplotlib
"""
from __future__ import annotations

import argparse
import os
import sys

# Ensure the repo root (parent of scripts/) is importable regardless of cwd
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import matplotlib.pyplot as plt
import numpy as np
from mpl_toolkits.mplot3d.art3d import Poly3DCollection

from contour2d import ContourBuilder, Grid2D, fill_contour
from surface3d import Structure


def _outline(radius: float, lobes: int, n: int = 48) -> list[tuple[float, float]]:
    t = np.linspace(0.0, 2.0 * np.pi, n, endpoint=False)
    r = radius * (1.0 + 0.15 * np.cos(lobes * t))
    return list(zip(50.0 + r * np.cos(t), 50.0 + r * np.sin(t)))


def _build_structure() -> Structure:
    structure = Structure()
    for z, radius, lobes in [(0.0, 40, 3), (5.0, 34, 3), (10.0, 28, 4), (15.0, 18, 5)]:
        builder = ContourBuilder()
        for p in _outline(radius, lobes):
            if builder.try_append(p):
                builder.append(p)
            else:
                print(f"z={z}: rejected point ({p[0]:.1f}, {p[1]:.1f})")
        structure.push(z, builder.close())
    return structure


def render(structure: Structure, out_path: str, min_res: int) -> None:
    fig = plt.figure(figsize=(10, 5), facecolor="#111111")

    z0 = structure.elevations()[0]
    contour = structure.get_contours_at(z0)[0]
    mask = fill_contour(Grid2D(101, 101, dtype=np.uint8), contour)
    ax = fig.add_subplot(1, 2, 1)
    ax.imshow(mask.as_array(), origin="lower", cmap="gray")
    ax.plot(*np.vstack([contour.points, contour.points[:1]]).T, color="orange", lw=1)
    ax.set_title(f"mask at z={z0:g}, area {structure.area_at(z0):.0f}",
                 color="white", fontsize=9)
    ax.set_axis_off()

    surface = structure.to_mesh(min_resolution=min_res)
    ax = fig.add_subplot(1, 2, 2, projection="3d")
    ax.set_facecolor("#111111")
    ax.set_axis_off()
    ax.add_collection3d(Poly3DCollection(surface.vertices[surface.indices],
                                         facecolors=(1.0, 0.82, 0.2),
                                         edgecolors="#00000033", linewidths=0.1))
    (x0, y0, zlo), (x1, y1, zhi) = structure.bounding_box()
    ax.set_xlim(x0, x1); ax.set_ylim(y0, y1); ax.set_zlim(zlo, zhi)
    ax.set_title(f"{surface.n_triangles} triangles, volume {structure.volume():.0f}",
                 color="white", fontsize=9)

    plt.tight_layout(pad=0.3)
    fig.savefig(out_path, dpi=150, bbox_inches="tight", facecolor=fig.get_facecolor())
    plt.close(fig)
    print(f"Saved: {out_path}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Mesh a stack of planar contours.")
    parser.add_argument("--out", default="contour_stack.png", help="Output PNG path")
    parser.add_argument("--min-res", type=int, default=50,
                        help="Minimum raster size per axis (default 50)")
    args = parser.parse_args()

    render(_build_structure(), args.out, args.min_res)


if __name__ == "__main__":
    main()
