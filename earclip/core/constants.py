"""Central numerical tolerances.

The ear clipping predicates compare plain floats against zero; these
tolerances are only used by the post-hoc validation helpers.
"""
from __future__ import annotations

EPS_AREA: float = 1e-12           # absolute tolerance for area sums
EPS_OVERLAP: float = 1e-9         # relative tolerance for triangle overlap area

__all__ = [
    'EPS_AREA',
    'EPS_OVERLAP',
]
