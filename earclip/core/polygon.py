"""Indexed polygon model used by the ear clipping driver.

The model owns the ring of vertex indices still forming the polygon
boundary and keeps three derived classifications (convex, reflex, ear) in
step with it while vertices are removed one at a time.

The ring is a doubly linked arena over the original indices: ``_prev`` and
``_next`` hold the neighbors of every vertex and ``_alive`` marks the ones
still present, so neighbor lookup and removal are O(1). Coordinates are
never copied or modified; only indices are stored.

Classification is a cache. ``_kind`` maps every live vertex to the
:class:`VertexKind` computed by :func:`classify_triangle` on its local
triangle, ``_reflex`` mirrors the reflex entries for fast scanning, and
``_ears`` holds the convex vertices whose local triangle contains no other
reflex vertex. The public queries fall back to recomputation when the cache
has no positive answer.

Example:
    >>> poly = IndexedPolygon([(0, 0), (2, 0), (2, 2), (0, 2)])
    >>> poly.next_ear()
    0
    >>> poly.remove_vertex(0)
    IndexTriangle(a=3, b=0, c=1)
"""
from __future__ import annotations
import logging
import numpy as np
from typing import Dict, FrozenSet, List, Optional, Set

from .exceptions import OutOfRangeError, VertexNotFoundError, EarNotFoundError
from .geometry import (
    VertexKind, IndexTriangle, RealTriangle,
    classify_triangle, is_convex, point_in_triangle,
)
from .logging_utils import get_logger
from .stats import EarClipStats

logger = get_logger('earclip.polygon')

__all__ = ['IndexedPolygon']


class IndexedPolygon:
    """Mutable ring of point indices with incremental vertex classification.

    Parameters
    ----------
    points : (N, 2) array-like of float
        Polygon boundary in winding order. Converted with ``np.asarray``
        (no copy for float arrays) and treated as read-only.
    orientation : int
        +1 when the contour is counter-clockwise, -1 when clockwise. Decides
        which turn direction counts as convex.
    stats : EarClipStats, optional
        Counters updated by classification work. A fresh instance is used
        when omitted.
    """

    def __init__(self, points, orientation: int = 1, stats: Optional[EarClipStats] = None):
        pts = np.asarray(points, dtype=float)
        n = pts.shape[0] if pts.ndim else 0
        if n < 3:
            raise OutOfRangeError(f"polygon needs at least 3 points, got {n}")
        if pts.ndim != 2 or pts.shape[1] != 2:
            raise ValueError(f"points must have shape (N, 2), got {pts.shape}")
        self._points = pts
        self.orientation = 1 if orientation >= 0 else -1
        self.stats = stats if stats is not None else EarClipStats()
        self.stats.vertices = n

        self._next: List[int] = list(range(1, n)) + [0]
        self._prev: List[int] = [n - 1] + list(range(n - 1))
        self._alive: List[bool] = [True] * n
        self._head = 0
        self._size = n

        self._kind: Dict[int, VertexKind] = {}
        self._reflex: Set[int] = set()
        self._ears: Set[int] = set()

        for v in range(n):
            self._set_kind(v, self.classify(v))
        for v in sorted(self.convex_vertices):
            if self.is_ear(v, pre_test=False):
                self._ears.add(v)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("classified %d vertices: %d convex, %d reflex, %d ears",
                         n, len(self.convex_vertices), len(self._reflex), len(self._ears))

    # ------------------------------------------------------------------
    # Ring access
    # ------------------------------------------------------------------
    @property
    def points(self) -> np.ndarray:
        return self._points

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __contains__(self, vertex) -> bool:
        return 0 <= vertex < len(self._alive) and self._alive[vertex]

    def ring(self) -> List[int]:
        """Current boundary as a list of indices, in original winding order."""
        out = []
        v = self._head
        for _ in range(self._size):
            out.append(v)
            v = self._next[v]
        return out

    def triangle_at_vertex(self, vertex: int) -> IndexTriangle:
        """Return ``(prev, vertex, next)`` for a vertex still in the ring."""
        if vertex not in self:
            raise VertexNotFoundError(vertex)
        return IndexTriangle(self._prev[vertex], vertex, self._next[vertex])

    def triangle_at_index(self, i: int) -> IndexTriangle:
        """Return the local triangle of the vertex at ring position ``i``."""
        if not 0 <= i < self._size:
            raise OutOfRangeError(f"ring position {i} out of range for ring of size {self._size}")
        v = self._head
        for _ in range(i):
            v = self._next[v]
        return self.triangle_at_vertex(v)

    def real_triangle(self, tri) -> RealTriangle:
        """Resolve an index triangle into coordinates."""
        n = self._points.shape[0]
        for idx in tri:
            if not 0 <= idx < n:
                raise OutOfRangeError(f"point index {idx} out of range for {n} points")
        pts = self._points
        return RealTriangle(pts[tri[0]], pts[tri[1]], pts[tri[2]])

    def real_triangle_at(self, vertex: int) -> RealTriangle:
        return self.real_triangle(self.triangle_at_vertex(vertex))

    # ------------------------------------------------------------------
    # Classification queries
    # ------------------------------------------------------------------
    @property
    def convex_vertices(self) -> FrozenSet[int]:
        return frozenset(v for v, k in self._kind.items() if k is VertexKind.CONVEX)

    @property
    def reflex_vertices(self) -> FrozenSet[int]:
        return frozenset(self._reflex)

    @property
    def ear_vertices(self) -> FrozenSet[int]:
        return frozenset(self._ears)

    def cached_kind(self, vertex: int) -> Optional[VertexKind]:
        """Stored classification of ``vertex`` (None once removed)."""
        return self._kind.get(vertex)

    def classify(self, vertex: int) -> VertexKind:
        """Recompute the kind of ``vertex`` from its current neighbors."""
        return classify_triangle(self.real_triangle_at(vertex), self.orientation)

    def is_convex(self, vertex: int) -> bool:
        if self._kind.get(vertex) is VertexKind.CONVEX:
            return True
        return self.classify(vertex) is VertexKind.CONVEX

    def is_reflex(self, vertex: int) -> bool:
        if vertex in self._reflex:
            return True
        return self.classify(vertex) is VertexKind.REFLEX

    def is_ear(self, vertex: int, pre_test: bool = True) -> bool:
        """True if ``vertex`` can be clipped.

        With ``pre_test`` a vertex already cached as an ear is accepted
        directly. Otherwise the local triangle is rebuilt and every reflex
        vertex other than its three corners is tested against it; points on
        the triangle boundary count as contained.
        """
        if pre_test and vertex in self._ears:
            return True
        tri = self.triangle_at_vertex(vertex)
        real = self.real_triangle(tri)
        if not is_convex(real, self.orientation):
            return False
        self.stats.ear_tests += 1
        pts = self._points
        for r in self._reflex:
            if r == tri.a or r == tri.b or r == tri.c:
                continue
            self.stats.reflex_checks += 1
            if point_in_triangle(real, pts[r]):
                return False
        return True

    def has_ear(self) -> bool:
        return bool(self._ears)

    def next_ear(self) -> int:
        """Smallest index currently classified as an ear."""
        if not self._ears:
            raise EarNotFoundError()
        return min(self._ears)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def update_vertex(self, vertex: int) -> bool:
        """Re-derive the classification of ``vertex``.

        Returns True if the vertex is convex. A convex vertex gets a fresh
        ear test; any other vertex is dropped from the ear set.
        """
        self.stats.vertex_updates += 1
        kind = self.classify(vertex)
        self._set_kind(vertex, kind)
        if kind is not VertexKind.CONVEX:
            self._ears.discard(vertex)
            return False
        if self.is_ear(vertex, pre_test=False):
            self._ears.add(vertex)
        else:
            self._ears.discard(vertex)
        return True

    def remove_vertex(self, vertex: int) -> IndexTriangle:
        """Clip ``vertex`` from the ring and return its triangle.

        Only the two former neighbors are reclassified.
        """
        tri = self.triangle_at_vertex(vertex)
        a, c = tri.a, tri.c
        self._next[a] = c
        self._prev[c] = a
        self._alive[vertex] = False
        self._size -= 1
        if self._head == vertex:
            self._head = c

        self._kind.pop(vertex, None)
        self._reflex.discard(vertex)
        self._ears.discard(vertex)

        for neighbor in dict.fromkeys((a, c)):
            if neighbor != vertex:
                self.update_vertex(neighbor)
        return tri

    def _set_kind(self, vertex: int, kind: VertexKind) -> None:
        self._kind[vertex] = kind
        if kind is VertexKind.REFLEX:
            self._reflex.add(vertex)
        else:
            self._reflex.discard(vertex)

    def __repr__(self) -> str:
        return (f"IndexedPolygon(size={self._size}, convex={len(self.convex_vertices)}, "
                f"reflex={len(self._reflex)}, ears={len(self._ears)})")
