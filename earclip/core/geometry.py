"""Geometry predicates over 2D points.

Points are any indexable ``(x, y)`` pair (tuples, lists or rows of an
``(N, 2)`` numpy array). All functions are pure; comparisons are plain
floating point against zero, with no tolerance.
"""
from __future__ import annotations
from enum import Enum
from typing import NamedTuple, Any
import numpy as np

__all__ = [
	'VertexKind', 'IndexTriangle', 'RealTriangle',
	'orientation_sign', 'point_in_triangle', 'signed_area_sign',
	'is_convex', 'is_reflex', 'classify_triangle', 'polygon_signed_area',
	'triangle_area',
]


class VertexKind(Enum):
	"""Local turn at a ring vertex."""
	CONVEX = 'convex'
	REFLEX = 'reflex'
	DEGENERATE = 'degenerate'


class IndexTriangle(NamedTuple):
	"""Triangle given as three indices into the caller's point array."""
	a: int
	b: int
	c: int


class RealTriangle(NamedTuple):
	"""Triangle given as three coordinates."""
	a: Any
	b: Any
	c: Any


def orientation_sign(p, q, r):
	"""Side of line q-r on which p lies; zero when the three are colinear."""
	return (p[0] - r[0]) * (q[1] - r[1]) - (q[0] - r[0]) * (p[1] - r[1])


def point_in_triangle(tri, p):
	"""True if p is inside triangle ``tri`` or on its boundary.

	Either winding of ``tri`` is accepted: the point is outside only when the
	three half-plane tests disagree in sign.
	"""
	d1 = orientation_sign(p, tri[0], tri[1])
	d2 = orientation_sign(p, tri[1], tri[2])
	d3 = orientation_sign(p, tri[2], tri[0])
	has_neg = (d1 < 0) or (d2 < 0) or (d3 < 0)
	has_pos = (d1 > 0) or (d2 > 0) or (d3 > 0)
	return not (has_neg and has_pos)


def signed_area_sign(tri):
	"""Cross product AB x BC of the triangle (A, B, C).

	Positive for a left turn at B, negative for a right turn, zero when
	degenerate.
	"""
	a, b, c = tri
	abx = b[0] - a[0]; aby = b[1] - a[1]
	bcx = c[0] - b[0]; bcy = c[1] - b[1]
	return abx * bcy - bcx * aby


def is_convex(tri, orientation=1):
	return orientation * signed_area_sign(tri) > 0


def is_reflex(tri, orientation=1):
	return orientation * signed_area_sign(tri) < 0


def classify_triangle(tri, orientation=1) -> VertexKind:
	"""Classify the middle vertex of ``tri``.

	``orientation`` is +1 for a counter-clockwise contour and -1 for a
	clockwise one.
	"""
	turn = orientation * signed_area_sign(tri)
	if turn > 0:
		return VertexKind.CONVEX
	if turn < 0:
		return VertexKind.REFLEX
	return VertexKind.DEGENERATE


def triangle_area(p0, p1, p2):
	"""Signed area of triangle p0,p1,p2 (positive if counter-clockwise)."""
	return 0.5 * ((p1[0] - p0[0]) * (p2[1] - p0[1]) - (p1[1] - p0[1]) * (p2[0] - p0[0]))


def polygon_signed_area(polygon):
	"""Return signed area of polygon (sequence of (x,y)); positive if CCW."""
	arr = np.asarray(polygon, dtype=float)
	if arr.ndim != 2 or arr.shape[0] < 3:
		return 0.0
	x = arr[:,0]; y = arr[:,1]
	return float(0.5 * (np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))))
