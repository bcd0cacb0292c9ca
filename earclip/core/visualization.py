"""Matplotlib rendering of polygon triangulations."""
from __future__ import annotations

import os as _os
import matplotlib as _mpl
# Ensure a non-interactive backend in headless environments before importing pyplot
if not _os.environ.get('MPLBACKEND'):
    _mpl.use('Agg')
import numpy as np
import matplotlib.pyplot as plt

from .logging_utils import get_logger

logger = get_logger('earclip.viz')

__all__ = ['plot_triangulation']


def plot_triangulation(points, triangles, outname="triangulation.png", label_vertices=None, title=None):
    """Draw the polygon outline and its triangles to ``outname``.

    Args:
        points: (N, 2) polygon boundary in winding order
        triangles: iterable of index triples; may be empty (outline only)
        outname: output image path
        label_vertices: annotate vertex indices; defaults to True for N <= 40
        title: figure title, defaults to a triangle count summary
    """
    pts = np.asarray(points, dtype=float)
    tris = np.asarray(list(triangles), dtype=int).reshape(-1, 3)
    if label_vertices is None:
        label_vertices = pts.shape[0] <= 40
    fig, ax = plt.subplots(figsize=(6, 6))
    if tris.size:
        ax.triplot(pts[:, 0], pts[:, 1], tris, color=(0.2, 0.4, 0.8), linewidth=0.8)
        ax.tripcolor(pts[:, 0], pts[:, 1], tris, facecolors=np.arange(len(tris)) % 7,
                     cmap='Pastel1', alpha=0.6)
    xs = list(pts[:, 0]) + [pts[0, 0]]
    ys = list(pts[:, 1]) + [pts[0, 1]]
    ax.plot(xs, ys, color=(0.85, 0.2, 0.2), linewidth=1.6)
    npts = max(1, pts.shape[0])
    ax.scatter(pts[:, 0], pts[:, 1], s=max(0.6, min(12.0, 200.0 / float(npts))), color='black', zorder=3)
    if label_vertices:
        for i, (x, y) in enumerate(pts):
            ax.annotate(str(i), (x, y), textcoords='offset points', xytext=(3, 3), fontsize=7)
    ax.set_title(title or f"{len(tris)} triangles / {pts.shape[0]} vertices")
    ax.set_aspect('equal')
    fig.savefig(outname, dpi=150)
    plt.close(fig)
    logger.debug("wrote %s", outname)
    return outname
