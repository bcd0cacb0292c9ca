"""Smoke test for the flat public API in ``earclip/__init__.py``."""


def test_import_earclip_smoke():
    import earclip  # noqa: F401
    assert hasattr(earclip, 'triangulate')
    assert hasattr(earclip, 'NonSimplePolygonError')
    assert callable(earclip.plot_triangulation)
    # lazy proxy should resolve
    assert callable(earclip.visualization.plot_triangulation)


def test_facade_triangulate():
    import earclip
    result = earclip.triangulate([(0, 0), (2, 0), (2, 2), (0, 2)])
    assert result.ok
    assert result.triangles[0] == earclip.IndexTriangle(3, 0, 1)
    ok, msgs = earclip.check_triangulation([(0, 0), (2, 0), (2, 2), (0, 2)], result.triangles)
    assert ok, msgs
