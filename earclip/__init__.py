"""Public package API for the earclip polygon triangulator.

This facade provides a flat import surface on top of the implementation
package ``earclip.core`` while deferring the matplotlib-backed
visualization module until first use to keep ``import earclip`` fast.

Example
-------
    from earclip import triangulate

    result = triangulate([(0, 0), (2, 0), (2, 2), (0, 2)])
    if result.ok:
        print(result.triangles)

The deeper modules (``earclip.core.*``) are considered internal and may
change; rely on this layer for public symbols.
"""
from importlib import import_module as _imp
import logging as _logging

try:
    from importlib.metadata import version as _pkg_version, PackageNotFoundError as _PNF
    __version__ = _pkg_version("earclip")  # populated when installed
except _PNF:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

# Eager light-weight submodules
_geom = _imp('earclip.core.geometry')
_poly = _imp('earclip.core.polygon')
_tri = _imp('earclip.core.triangulation')
_exc = _imp('earclip.core.exceptions')
_conf = _imp('earclip.core.config')
_stats = _imp('earclip.core.stats')
_valid = _imp('earclip.core.validation')


def _lazy_module(mod_name):
    class _ModuleProxy:
        __slots__ = ('_m',)
        def _load(self):
            try:
                return object.__getattribute__(self, '_m')
            except AttributeError:
                mod = _imp(mod_name)
                object.__setattr__(self, '_m', mod)
                return mod
        def __getattr__(self, item):
            return getattr(self._load(), item)
        def __dir__(self):
            return dir(self._load())
    return _ModuleProxy()


# Lazily loaded matplotlib-dependent module
visualization = _lazy_module('earclip.core.visualization')


def plot_triangulation(*args, **kwargs):
    return visualization.plot_triangulation(*args, **kwargs)


# Entry points
triangulate = _tri.triangulate
ear_clip_triangulation = _tri.ear_clip_triangulation
TriangulationResult = _tri.TriangulationResult
TriangulationStatus = _tri.TriangulationStatus
TriangulationConfig = _conf.TriangulationConfig
IndexedPolygon = _poly.IndexedPolygon
EarClipStats = _stats.EarClipStats

# Geometry types and predicates
IndexTriangle = _geom.IndexTriangle
RealTriangle = _geom.RealTriangle
VertexKind = _geom.VertexKind
point_in_triangle = _geom.point_in_triangle
polygon_signed_area = _geom.polygon_signed_area

# Errors
TriangulationError = _exc.TriangulationError
OutOfRangeError = _exc.OutOfRangeError
VertexNotFoundError = _exc.VertexNotFoundError
EarNotFoundError = _exc.EarNotFoundError
NonSimplePolygonError = _exc.NonSimplePolygonError

check_triangulation = _valid.check_triangulation

# Namespace submodules for exploratory users
geometry = _geom
polygon = _poly
triangulation = _tri
exceptions = _exc
config = _conf
stats = _stats
validation = _valid

__all__ = [
    '__version__',
    # entry points
    'triangulate', 'ear_clip_triangulation', 'TriangulationResult', 'TriangulationStatus',
    'TriangulationConfig', 'IndexedPolygon', 'EarClipStats', 'check_triangulation',
    'plot_triangulation',
    # geometry
    'IndexTriangle', 'RealTriangle', 'VertexKind', 'point_in_triangle', 'polygon_signed_area',
    # errors
    'TriangulationError', 'OutOfRangeError', 'VertexNotFoundError', 'EarNotFoundError',
    'NonSimplePolygonError',
    # submodules / namespaces
    'geometry', 'polygon', 'triangulation', 'exceptions', 'config', 'stats', 'validation',
    'visualization',
]
