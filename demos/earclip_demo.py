#!/usr/bin/env python3
"""
Demo: Triangulate a polygon by ear clipping.

Reads a polygon from a JSON file (a list of [x, y] pairs in winding order)
or uses a built-in L-shaped sample, prints one line per triangle and
optionally writes a PNG of the result.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys

import numpy as np

from earclip.core.config import TriangulationConfig
from earclip.core.logging_utils import configure_logging, get_logger
from earclip.core.stats import format_stats_table
from earclip.core.triangulation import triangulate
from earclip.core.validation import check_triangulation

log = get_logger('earclip.demo')

SAMPLE_POLYGON = [
    [0.0, 0.0], [2.0, 0.0], [2.0, 1.0], [1.0, 1.0], [1.0, 2.0], [0.0, 2.0],
]


def load_polygon(path):
    with open(path, 'r') as fh:
        data = json.load(fh)
    pts = np.asarray(data, dtype=float)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError(f"{path}: expected a list of [x, y] pairs, got shape {pts.shape}")
    return pts


def run_demo(points, plot=None, show_stats=False, debug=False) -> int:
    result = triangulate(points, TriangulationConfig(debug=debug))
    if not result.ok:
        print(result.message)
        return 1
    for tri in result.triangles:
        print(f"A: {tri.a}, B: {tri.b}, C: {tri.c}")
    ok, msgs = check_triangulation(points, result.triangles)
    for m in msgs:
        log.warning(m)
    if show_stats and result.stats is not None:
        print(format_stats_table(result.stats.to_dict()))
    if plot:
        from earclip.core.visualization import plot_triangulation
        plot_triangulation(points, result.triangles, outname=plot)
        log.info('Wrote %s', plot)
    return 0 if ok else 2


def main(argv=None):
    ap = argparse.ArgumentParser(description='Ear clipping triangulation of a simple polygon')
    ap.add_argument('--input', type=str, default=None, help='JSON file with a list of [x, y] points')
    ap.add_argument('--plot', type=str, default=None, help='write a PNG of the triangulation')
    ap.add_argument('--stats', action='store_true', help='print classification statistics')
    ap.add_argument('--log-level', type=str, choices=['DEBUG','INFO','WARNING','ERROR','CRITICAL'], default='INFO')
    args = ap.parse_args(argv)

    configure_logging(getattr(logging, args.log_level.upper(), logging.INFO))
    points = load_polygon(args.input) if args.input else np.asarray(SAMPLE_POLYGON)
    return run_demo(points, plot=args.plot, show_stats=args.stats,
                    debug=args.log_level.upper() == 'DEBUG')


if __name__ == '__main__':
    sys.exit(main())
