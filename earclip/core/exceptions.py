"""Error hierarchy for polygon triangulation.

Every error aborts the triangulation call it was raised from; nothing is
retried.
"""
from __future__ import annotations


class TriangulationError(Exception):
    """Base class for earclip errors."""


class OutOfRangeError(TriangulationError, IndexError):
    """A ring position or point index is outside its bounds, or the input
    has fewer than three points."""


class VertexNotFoundError(TriangulationError, LookupError):
    """The referenced vertex is no longer part of the ring."""

    def __init__(self, vertex, message=None):
        self.vertex = vertex
        super().__init__(message or f"vertex {vertex} is not in the ring")


class EarNotFoundError(VertexNotFoundError):
    """An ear was requested while the ear set is empty."""

    def __init__(self, message="ear set is empty"):
        super().__init__(None, message)


class NonSimplePolygonError(TriangulationError, ValueError):
    """The boundary crosses itself, or no ear is left while more than two
    vertices remain.

    By the two-ears theorem ear exhaustion only happens when the input is not
    a simple, consistently wound polygon, or when collinear vertices leave a
    flat remainder.
    """

    def __init__(self, message, remaining=None):
        self.remaining = remaining
        super().__init__(message)


__all__ = [
    'TriangulationError',
    'OutOfRangeError',
    'VertexNotFoundError',
    'EarNotFoundError',
    'NonSimplePolygonError',
]
