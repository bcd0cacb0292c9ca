"""Configuration objects for ear clipping triangulation."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TriangulationConfig:
    """Options for :func:`earclip.core.triangulation.triangulate`.

    Attributes
    ----------
    auto_orient : bool
        Detect the contour winding from its signed area and classify a
        clockwise contour with reversed orientation. When False the
        counter-clockwise convention is assumed and a clockwise contour
        fails as non-simple.
    collect_stats : bool
        Attach an :class:`EarClipStats` to the result.
    debug : bool
        Log every harvested ear at DEBUG level.
    reject_self_intersections : bool
        Check every pair of non-adjacent edges for a crossing before
        clipping and report a crossing contour as non-simple. Without the
        check some crossing contours still clip down to a full (but
        overlapping) triangle set.
    """
    auto_orient: bool = True
    collect_stats: bool = True
    debug: bool = False
    reject_self_intersections: bool = True


__all__ = ['TriangulationConfig']
