"""Unit tests for triangulation validation helpers."""
import pytest

from earclip.core.validation import (
    check_triangulation, compute_triangulation_area, polygon_has_self_intersections,
    triangles_overlap,
)


class TestComputeTriangulationArea:

    def test_empty(self, unit_square):
        assert compute_triangulation_area(unit_square, []) == 0.0

    def test_square(self, unit_square):
        area = compute_triangulation_area(unit_square, [(0, 1, 2), (0, 2, 3)])
        assert abs(area - 1.0) < 1e-12

    def test_winding_does_not_matter(self, unit_square):
        assert compute_triangulation_area(unit_square, [(2, 1, 0)]) == pytest.approx(0.5)


class TestSelfIntersections:

    def test_simple_polygons(self, unit_square, l_shape):
        assert not polygon_has_self_intersections(unit_square)
        assert not polygon_has_self_intersections(l_shape)

    def test_bowtie(self, bowtie):
        assert polygon_has_self_intersections(bowtie)

    def test_overlapping_adjacent_edges(self):
        assert polygon_has_self_intersections([(2, 0), (1, 0), (0, 1), (-1, 0)])

    def test_straight_vertex_is_fine(self):
        assert not polygon_has_self_intersections([(0, 0), (1, 0), (2, 0), (1, 1)])

    def test_triangle_never_intersects(self):
        assert not polygon_has_self_intersections([(0, 0), (1, 0), (0, 1)])


def test_triangles_overlap():
    a = ((0, 0), (1, 0), (1, 1))
    b = ((0, 0), (1, 0), (0, 1))
    c = ((0, 0), (1, 1), (0, 1))
    assert triangles_overlap(a, b)
    assert not triangles_overlap(a, c)
    # touching at a single vertex
    assert not triangles_overlap(((0, 0), (1, 1), (-1, 1)), ((0, 0), (1, -1), (-1, -1)))


class TestCheckTriangulation:

    def test_valid(self, unit_square):
        ok, msgs = check_triangulation(unit_square, [(0, 1, 2), (0, 2, 3)])
        assert ok and msgs == []

    def test_wrong_count(self, unit_square):
        ok, msgs = check_triangulation(unit_square, [(0, 1, 2)])
        assert not ok
        assert any('Expected 2 triangles' in m for m in msgs)

    def test_repeated_vertex(self, unit_square):
        ok, msgs = check_triangulation(unit_square, [(0, 1, 1), (0, 2, 3)])
        assert not ok
        assert any('repeats a vertex' in m for m in msgs)

    def test_index_out_of_range(self, unit_square):
        ok, msgs = check_triangulation(unit_square, [(0, 1, 2), (0, 2, 4)])
        assert not ok
        assert any('outside' in m for m in msgs)

    def test_overlap_with_matching_area(self, unit_square):
        # both triangles have area 0.5 so only the overlap test catches this
        ok, msgs = check_triangulation(unit_square, [(0, 1, 2), (0, 1, 3)])
        assert not ok
        assert any('overlap' in m for m in msgs)

    def test_area_mismatch(self, l_shape):
        ok, msgs = check_triangulation(l_shape, [(0, 1, 2), (0, 2, 3), (0, 3, 4), (0, 4, 5)])
        assert ok
        ok, msgs = check_triangulation(l_shape, [(0, 1, 2), (0, 1, 4), (0, 4, 5), (2, 3, 4)])
        assert not ok
        assert any('differs from polygon area' in m for m in msgs)
