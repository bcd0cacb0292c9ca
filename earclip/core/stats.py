"""Triangulation statistics and presentation utilities."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Any


@dataclass
class EarClipStats:
    vertices: int = 0
    ears_removed: int = 0
    # Classification work done by the polygon model
    vertex_updates: int = 0
    ear_tests: int = 0
    reflex_checks: int = 0
    # Timing (seconds)
    time_total: float = 0.0

    def to_dict(self) -> Dict[str, Any]:  # pragma: no cover - simple mapping
        return {
            'vertices': self.vertices,
            'ears_removed': self.ears_removed,
            'vertex_updates': self.vertex_updates,
            'ear_tests': self.ear_tests,
            'reflex_checks': self.reflex_checks,
            'reflex_checks_per_test': (self.reflex_checks / self.ear_tests) if self.ear_tests else 0.0,
            'time_total': self.time_total,
        }


def format_stats_table(stats_dict) -> str:
    """Return a two-column text table for ``EarClipStats.to_dict()`` output."""
    if not stats_dict:
        return "<no stats>"
    rows = []
    for key in stats_dict:
        val = stats_dict[key]
        if key == 'time_total':
            rows.append(('time_ms', f"{val * 1000.0:.3f}"))
        elif isinstance(val, float):
            rows.append((key, f"{val:.2f}"))
        else:
            rows.append((key, str(val)))
    kw = max(len(k) for k, _ in rows)
    vw = max(len("value"), max(len(v) for _, v in rows))
    lines = [f"{'stat'.ljust(kw)} {'value'.rjust(vw)}", "-" * (kw + vw + 1)]
    lines.extend(f"{k.ljust(kw)} {v.rjust(vw)}" for k, v in rows)
    return "\n".join(lines)


__all__ = ["EarClipStats", "format_stats_table"]
