"""Render isosurfaces of a few analytic fields on one page.

Each field is sampled on a regular grid and meshed with the MC33
extractor in :mod:`surface3d`; matplotlib's 3-D axes display the result.

Usage::

    python scripts/gallery_isosurface.py                # saves gallery_isosurface.png
    python scripts/gallery_isosurface.py --out my_file.png
    python scripts/gallery_isosurface.py --res 24       # faster, coarser

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

from surface3d import extract_isosurface, sample_grid_3d


# ---------------------------------------------------------------------------
# Field catalogue  (label, func, isovalue)
# ---------------------------------------------------------------------------

def _make_fields() -> list[tuple[str, object, float]]:
    def sphere(x, y, z):
        return -np.sqrt(x * x + y * y + z * z)

    def torus(x, y, z):
        q = np.sqrt(x * x + y * y) - 0.6
        return -np.sqrt(q * q + z * z)

    def wavy(x, y, z):
        return (np.sin(x * y) + np.sin(y * z) + np.sin(x * z)) / (1.0 + x * x + y * y + z * z)

    def gyroid(x, y, z):
        s = 3.0
        return (np.sin(s * x) * np.cos(s * y) + np.sin(s * y) * np.cos(s * z)
                + np.sin(s * z) * np.cos(s * x))

    def blobs(x, y, z):
        d1 = (x - 0.35) ** 2 + y * y + z * z
        d2 = (x + 0.35) ** 2 + y * y + z * z
        return 1.0 / (d1 + 0.05) + 1.0 / (d2 + 0.05)

    return [
        ("sphere", sphere, -0.7),
        ("torus", torus, -0.25),
        ("wavy", wavy, 0.02),
        ("gyroid", gyroid, 0.0),
        ("blobs", blobs, 6.0),
    ]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def render_gallery(fields, out_path: str, ncols: int = 5, res: int = 40) -> None:
    nrows = (len(fields) + ncols - 1) // ncols
    fig = plt.figure(figsize=(ncols * 3.0, nrows * 3.0), facecolor="#111111")

    lo, hi = -1.0, 1.0
    scale = (hi - lo) / (res - 1)
    face_color = np.array([0.35, 0.75, 1.0])
    light = np.array([0.577, 0.577, 0.577])

    for idx, (label, func, iso) in enumerate(fields):
        ax = fig.add_subplot(nrows, ncols, idx + 1, projection="3d")
        ax.set_facecolor("#111111")
        ax.set_axis_off()
        ax.set_title(f"{label} @ {iso:g}", color="white", fontsize=7, pad=1)

        grid = sample_grid_3d(func, ((lo, hi),) * 3, (res, res, res))
        surface = extract_isosurface(grid, iso)
        if surface.n_triangles == 0:
            ax.text2D(0.5, 0.5, "no surface", ha="center", va="center",
                      color="gray", transform=ax.transAxes, fontsize=7)
            continue

        verts = surface.vertices * scale + lo
        # per-face shading from the averaged vertex normals
        norms = surface.normals[surface.indices].mean(axis=1)
        nlen = np.linalg.norm(norms, axis=1, keepdims=True)
        norms = norms / np.where(nlen > 0, nlen, 1.0)
        shade = 0.3 + 0.7 * np.clip(norms @ light, 0.0, 1.0)
        mesh = Poly3DCollection(verts[surface.indices],
                                facecolors=np.outer(shade, face_color),
                                edgecolors="none")
        ax.add_collection3d(mesh)

        ax.set_xlim(lo, hi); ax.set_ylim(lo, hi); ax.set_zlim(lo, hi)
        ax.set_box_aspect([1, 1, 1])
        ax.view_init(elev=20, azim=35)

    fig.suptitle("surface3d: MC33 isosurfaces", color="white", fontsize=13, y=1.002)
    plt.tight_layout(pad=0.3)
    fig.savefig(out_path, dpi=180, bbox_inches="tight", facecolor=fig.get_facecolor())
    plt.close(fig)
    print(f"Saved: {out_path}")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Render isosurfaces of analytic fields to a single PNG gallery."
    )
    parser.add_argument("--out", default="gallery_isosurface.png", help="Output PNG path")
    parser.add_argument("--cols", type=int, default=5, help="Number of columns (default 5)")
    parser.add_argument("--res", type=int, default=40,
                        help="Grid resolution per axis (default 40)")
    args = parser.parse_args()

    render_gallery(_make_fields(), args.out, ncols=args.cols, res=args.res)


if __name__ == "__main__":
    main()
