"""
Tests for geometry and collision helpers.
"""
import pytest

from sideshooter.utils import (
    clamp,
    map_range,
    segments_intersect,
    point_in_polygon,
    collide_rect_poly,
)

# Right-pointing triangle: back edge at x=0, nose at (60, 15)
TRIANGLE = [(0.0, 0.0), (60.0, 15.0), (0.0, 30.0)]


class TestScalars:
    """Tests for clamp and map_range."""

    def test_clamp(self):
        """Values are pinned to the bounds."""
        assert clamp(-1, 0, 10) == 0
        assert clamp(11, 0, 10) == 10
        assert clamp(5, 0, 10) == 5

    def test_map_range_endpoints(self):
        """Endpoints map onto endpoints."""
        assert map_range(0, 0, 100, 1, 2) == pytest.approx(1)
        assert map_range(100, 0, 100, 1, 2) == pytest.approx(2)

    def test_map_range_is_unclamped(self):
        """Values outside the source range extrapolate."""
        assert map_range(200, 0, 100, 1, 2) == pytest.approx(3)


class TestSegments:
    """Tests for segment intersection."""

    def test_crossing_segments(self):
        """An X shape intersects."""
        assert segments_intersect(0, 0, 10, 10, 0, 10, 10, 0)

    def test_disjoint_segments(self):
        """Segments that would cross only when extended do not intersect."""
        assert not segments_intersect(0, 0, 1, 1, 5, 0, 4, 1)

    def test_parallel_segments(self):
        """Parallel segments never report an intersection."""
        assert not segments_intersect(0, 0, 10, 0, 0, 5, 10, 5)

    def test_touching_endpoint(self):
        """Sharing an endpoint counts as intersecting."""
        assert segments_intersect(0, 0, 5, 5, 5, 5, 10, 0)


class TestPointInPolygon:
    """Tests for the ray casting point test."""

    def test_inside(self):
        assert point_in_polygon(10, 15, TRIANGLE)

    def test_outside_beyond_nose(self):
        assert not point_in_polygon(70, 15, TRIANGLE)

    def test_outside_next_to_slope(self):
        """Near the back-top corner but above the sloped edge."""
        assert not point_in_polygon(50, 2, TRIANGLE)


class TestCollideRectPoly:
    """Tests for rectangle vs polygon intersection."""

    def test_rect_across_nose(self):
        """A bullet overlapping the nose tip collides."""
        assert collide_rect_poly(55, 13, 20, 5, TRIANGLE)

    def test_rect_clear_of_polygon(self):
        """A bullet ahead of the nose does not collide."""
        assert not collide_rect_poly(65, 13, 20, 5, TRIANGLE)

    def test_rect_in_bounding_box_but_outside_triangle(self):
        """The hit shape is the triangle, not its bounding box."""
        assert not collide_rect_poly(45, 0, 10, 2, TRIANGLE)

    def test_rect_fully_inside_polygon(self):
        """A small rect entirely inside the hull still collides."""
        assert collide_rect_poly(5, 13, 10, 4, TRIANGLE)

    def test_rect_fully_inside_without_interior(self):
        """Edge-only mode ignores full containment."""
        assert not collide_rect_poly(5, 13, 10, 4, TRIANGLE, interior=False)

    def test_polygon_inside_rect(self):
        """A rect swallowing the polygon collides."""
        assert collide_rect_poly(-10, -10, 100, 100, TRIANGLE)
