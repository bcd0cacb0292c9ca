"""Post-hoc checks for polygon triangulations.

These helpers are independent of the ear clipping internals; they take the
caller's points and a list of index triangles and report what is wrong,
in the ``(ok, msgs)`` form used across the package.
"""
from __future__ import annotations
from typing import List, Tuple

import numpy as np

from .constants import EPS_AREA, EPS_OVERLAP
from .geometry import orientation_sign, polygon_signed_area, triangle_area

__all__ = [
    'compute_triangulation_area',
    'polygon_has_self_intersections',
    'triangles_overlap',
    'check_triangulation',
]


def compute_triangulation_area(points, triangles) -> float:
    """Sum of absolute triangle areas."""
    pts = np.asarray(points, dtype=float)
    tris = np.asarray(triangles, dtype=int).reshape(-1, 3)
    if tris.size == 0:
        return 0.0
    p0 = pts[tris[:, 0]]; p1 = pts[tris[:, 1]]; p2 = pts[tris[:, 2]]
    cross = (p1[:, 0]-p0[:, 0])*(p2[:, 1]-p0[:, 1]) - (p1[:, 1]-p0[:, 1])*(p2[:, 0]-p0[:, 0])
    return float(0.5 * np.sum(np.abs(cross)))


def polygon_has_self_intersections(polygon) -> bool:
    """Return True if polygon (sequence of (x,y)) contains any pair of crossing non-adjacent edges."""
    pts = [np.asarray(p, dtype=float) for p in polygon]
    n = len(pts)
    if n < 4:
        return False

    def seg_inter(a, b, c, d):
        o1 = orientation_sign(c, a, b); o2 = orientation_sign(d, a, b)
        o3 = orientation_sign(a, c, d); o4 = orientation_sign(b, c, d)
        if o1 == 0 and o2 == 0 and o3 == 0 and o4 == 0:
            # colinear: overlapping spans count as intersecting
            axis = 0 if abs(b[0] - a[0]) >= abs(b[1] - a[1]) else 1
            lo1, hi1 = sorted((a[axis], b[axis]))
            lo2, hi2 = sorted((c[axis], d[axis]))
            return min(hi1, hi2) > max(lo1, lo2)
        return (o1*o2 < 0) and (o3*o4 < 0)

    for i in range(n):
        a = pts[i]; b = pts[(i+1) % n]
        for j in range(i+1, n):
            if j == i + 1 or (i == 0 and j == n - 1):
                # adjacent edges may only share their common endpoint
                c = pts[j]; d = pts[(j+1) % n]
                if orientation_sign(c, a, b) == 0 and orientation_sign(d, a, b) == 0:
                    if seg_inter(a, b, c, d):
                        return True
                continue
            if seg_inter(a, b, pts[j], pts[(j+1) % n]):
                return True
    return False


def triangles_overlap(t1, t2, tol: float = 0.0) -> bool:
    """True if two triangles (coordinate triples) share interior area.

    Separating axis test over the six edges; touching along an edge or at a
    vertex is not an overlap.
    """
    for tri, other in ((t1, t2), (t2, t1)):
        sign = 1.0 if triangle_area(*tri) >= 0 else -1.0
        for k in range(3):
            p = tri[k]; q = tri[(k+1) % 3]
            if all(sign * orientation_sign(r, p, q) <= tol for r in other):
                return False
    return True


def check_triangulation(points, triangles, area_tol: float = EPS_AREA) -> Tuple[bool, List[str]]:
    """Check that ``triangles`` tile the simple polygon ``points``.

    Returns ``(ok, msgs)`` where msgs lists every violated property.
    """
    pts = np.asarray(points, dtype=float)
    n = pts.shape[0]
    tris = [tuple(int(v) for v in t) for t in triangles]
    msgs = []
    if len(tris) != n - 2:
        msgs.append(f"Expected {n - 2} triangles, got {len(tris)}.")
    for k, t in enumerate(tris):
        if any(v < 0 or v >= n for v in t):
            msgs.append(f"Triangle {k} {t} references a point outside 0..{n - 1}.")
        elif len(set(t)) != 3:
            msgs.append(f"Triangle {k} {t} repeats a vertex.")
    if msgs:
        return False, msgs

    poly_area = abs(polygon_signed_area(pts))
    tri_area = compute_triangulation_area(pts, tris)
    if abs(tri_area - poly_area) > max(area_tol, area_tol * poly_area):
        msgs.append(f"Triangle area {tri_area:.6e} differs from polygon area {poly_area:.6e}.")

    span = float(np.max(np.ptp(pts, axis=0))) if n else 0.0
    tol = EPS_OVERLAP * max(1.0, span * span)
    coords = [(pts[a], pts[b], pts[c]) for a, b, c in tris]
    for i in range(len(coords)):
        for j in range(i + 1, len(coords)):
            if triangles_overlap(coords[i], coords[j], tol):
                msgs.append(f"Triangles {i} {tris[i]} and {j} {tris[j]} overlap.")
    return (not msgs), msgs
