"""Tests for geometry.py"""

import math

import pytest

from spellguard.services.geometry import (
    ARENA_HEIGHT, ARENA_WIDTH, MapTriangle, Position,
    containing_map_triangle, cosine_angle, distance, distance_from_line,
)


class TestPosition:
    """Tests for Position."""

    def test_center(self):
        """Center uses integer halves of the arena."""
        assert Position.center() == Position(8815, 4500)

    def test_corners_are_valid(self):
        """All four corners are inside the arena."""
        for corner in (Position.top_left(), Position.top_right(),
                       Position.bottom_left(), Position.bottom_right()):
            assert corner.is_valid()

    def test_outside_points_are_invalid(self):
        """Anything past an edge is invalid."""
        assert not Position(-1, 0).is_valid()
        assert not Position(0, -0.5).is_valid()
        assert not Position(ARENA_WIDTH + 1, 0).is_valid()
        assert not Position(0, ARENA_HEIGHT + 1).is_valid()


class TestDistances:
    """Tests for point and line distances."""

    def test_distance_345(self):
        assert distance(Position(0, 0), Position(3, 4)) == pytest.approx(5.0)

    def test_distance_symmetric(self):
        p, q = Position(120, 7400), Position(9000, 15)
        assert distance(p, q) == pytest.approx(distance(q, p))

    def test_distance_from_line(self):
        """Height of the triangle dropped from the point."""
        d = distance_from_line(Position(5, 5), Position(0, 0), Position(10, 0))
        assert d == pytest.approx(5.0)

    def test_distance_from_line_collinear(self):
        """Collinear points sit on the line, never NaN."""
        d = distance_from_line(Position(20, 0), Position(0, 0), Position(10, 0))
        assert d == pytest.approx(0.0, abs=1e-6)
        assert not math.isnan(d)

    def test_distance_from_middle_line_at_base_corner(self):
        """A base corner is as far from the middle line as the diagonal allows."""
        d = distance_from_line(Position(0, 0), Position.bottom_left(), Position.top_right())
        expected = ARENA_WIDTH * ARENA_HEIGHT / math.hypot(ARENA_WIDTH, ARENA_HEIGHT)
        assert d == pytest.approx(expected, rel=1e-6)


class TestCosineAngle:
    """Tests for the law-of-cosines angle."""

    def test_right_angle(self):
        assert cosine_angle(Position(0, 0), Position(10, 0), Position(0, 10)) == pytest.approx(0.0, abs=1e-9)

    def test_same_direction(self):
        assert cosine_angle(Position(0, 0), Position(10, 0), Position(30, 0)) == pytest.approx(1.0)

    def test_opposite_direction(self):
        assert cosine_angle(Position(0, 0), Position(10, 0), Position(-30, 0)) == pytest.approx(-1.0)

    def test_zero_length_ray(self):
        """A ray of length zero has no angle; treated as collinear."""
        assert cosine_angle(Position(5, 5), Position(5, 5), Position(0, 10)) == 1.0


class TestMapTriangle:
    """Tests for containing_map_triangle."""

    def test_corners(self):
        assert containing_map_triangle(Position.bottom_left()) == MapTriangle.UPPER
        assert containing_map_triangle(Position.top_right()) == MapTriangle.LOWER

    def test_diagonal_is_lower(self):
        """Points exactly on the base-to-base diagonal fall in LOWER."""
        assert containing_map_triangle(Position(ARENA_WIDTH / 2, ARENA_HEIGHT / 2)) == MapTriangle.LOWER
        assert containing_map_triangle(Position(0, 0)) == MapTriangle.LOWER

    def test_pure_function(self):
        """Re-evaluating the same point always gives the same answer."""
        for p in (Position(100, 8000), Position(17000, 300), Position(8000, 4200)):
            assert containing_map_triangle(p) == containing_map_triangle(Position(p.x, p.y))

    def test_off_diagonal_points_split(self):
        """Points just either side of the diagonal land in different halves."""
        above = Position(ARENA_WIDTH / 2, ARENA_HEIGHT / 2 + 1)
        below = Position(ARENA_WIDTH / 2, ARENA_HEIGHT / 2 - 1)
        assert containing_map_triangle(above) == MapTriangle.UPPER
        assert containing_map_triangle(below) == MapTriangle.LOWER
