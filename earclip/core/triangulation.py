"""Ear clipping triangulation of simple polygons.

The driver repeatedly asks the :class:`IndexedPolygon` for an ear, clips it
and collects the harvested index triangle until two vertices remain. A
simple polygon always has an ear (two-ears theorem), so running out of ears
earlier means the input was not simple; that outcome is reported as a
FAILED :class:`TriangulationResult` rather than raised.
"""
from __future__ import annotations
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

import numpy as np

from .config import TriangulationConfig
from .exceptions import NonSimplePolygonError
from .geometry import IndexTriangle, polygon_signed_area
from .logging_utils import get_logger
from .polygon import IndexedPolygon
from .stats import EarClipStats
from .validation import polygon_has_self_intersections

logger = get_logger('earclip.triangulation')

__all__ = [
    'TriangulationStatus',
    'TriangulationResult',
    'triangulate',
    'ear_clip_triangulation',
    'detect_orientation',
]


class TriangulationStatus(Enum):
    DONE = 'done'
    FAILED = 'failed'


@dataclass
class TriangulationResult:
    """Outcome of one triangulation call.

    On failure ``triangles`` is empty; work-in-progress triangles are never
    exposed.
    """
    status: TriangulationStatus
    triangles: List[IndexTriangle] = field(default_factory=list)
    message: str = ''
    remaining: int = 0
    stats: Optional[EarClipStats] = None

    @property
    def ok(self) -> bool:
        return self.status is TriangulationStatus.DONE

    def unwrap(self) -> List[IndexTriangle]:
        """Return the triangles or raise :class:`NonSimplePolygonError`."""
        if not self.ok:
            raise NonSimplePolygonError(self.message, remaining=self.remaining)
        return self.triangles

    def as_array(self) -> np.ndarray:
        """Triangles as an (M, 3) int array."""
        if not self.triangles:
            return np.empty((0, 3), dtype=int)
        return np.asarray(self.triangles, dtype=int)


def detect_orientation(points) -> int:
    """+1 for a counter-clockwise (or zero-area) contour, -1 for clockwise."""
    return -1 if polygon_signed_area(points) < 0 else 1


def triangulate(points, config: Optional[TriangulationConfig] = None) -> TriangulationResult:
    """Triangulate a simple polygon by ear clipping.

    Parameters
    ----------
    points : (N, 2) array-like of float
        Polygon boundary, N >= 3, without a repeated closing vertex.
    config : TriangulationConfig, optional

    Returns
    -------
    TriangulationResult
        DONE with exactly N-2 index triangles in the input winding, or
        FAILED when the boundary crosses itself or the polygon runs out of
        ears.

    Raises
    ------
    OutOfRangeError
        If fewer than three points are given.
    """
    cfg = config or TriangulationConfig()
    t0 = time.perf_counter()
    stats = EarClipStats()
    orientation = detect_orientation(points) if cfg.auto_orient else 1
    polygon = IndexedPolygon(points, orientation=orientation, stats=stats)
    n = polygon.size()
    triangles: List[IndexTriangle] = []

    if cfg.reject_self_intersections and polygon_has_self_intersections(polygon.points):
        stats.time_total = time.perf_counter() - t0
        msg = "Triangulation failed; polygon is non-simple (boundary edges cross or overlap)"
        logger.warning(msg)
        return TriangulationResult(
            TriangulationStatus.FAILED, [], msg,
            remaining=n,
            stats=stats if cfg.collect_stats else None,
        )

    while polygon.size() > 2:
        if not polygon.has_ear():
            stats.time_total = time.perf_counter() - t0
            msg = (f"Triangulation failed; polygon is non-simple "
                   f"({polygon.size()} of {n} vertices left without an ear)")
            logger.warning(msg)
            return TriangulationResult(
                TriangulationStatus.FAILED, [], msg,
                remaining=polygon.size(),
                stats=stats if cfg.collect_stats else None,
            )
        ear = polygon.next_ear()
        tri = polygon.remove_vertex(ear)
        stats.ears_removed += 1
        triangles.append(tri)
        if cfg.debug:
            logger.debug("clipped ear %d -> (%d, %d, %d), ring size %d",
                         ear, tri.a, tri.b, tri.c, polygon.size())

    stats.time_total = time.perf_counter() - t0
    logger.info("triangulated %d vertices into %d triangles in %.3f ms",
                n, len(triangles), stats.time_total * 1000.0)
    return TriangulationResult(
        TriangulationStatus.DONE, triangles, '',
        remaining=polygon.size(),
        stats=stats if cfg.collect_stats else None,
    )


def ear_clip_triangulation(points, config: Optional[TriangulationConfig] = None) -> List[IndexTriangle]:
    """Return the triangles of ``points`` or raise :class:`NonSimplePolygonError`."""
    return triangulate(points, config).unwrap()
