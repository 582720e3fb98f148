"""Tests for domain models to verify they work correctly."""

import pytest

from pathbool.domain import Contour, Point, Region, Segment

KAPPA = 0.5522847498


def unit_circle(cx: float = 0.0, cy: float = 0.0, r: float = 1.0) -> Contour:
    """Counter-clockwise four-segment circle approximation."""
    k = KAPPA * r
    return Contour(
        segments=[
            Segment(Point(cx + r, cy), Point(0, -k), Point(0, k)),
            Segment(Point(cx, cy + r), Point(k, 0), Point(-k, 0)),
            Segment(Point(cx - r, cy), Point(0, k), Point(0, -k)),
            Segment(Point(cx, cy - r), Point(-k, 0), Point(k, 0)),
        ]
    )


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(100.0, 200.0).to_tuple() == (100.0, 200.0)

    def test_point_arithmetic(self) -> None:
        """Test addition and subtraction."""
        assert Point(1, 2) + Point(3, 4) == Point(4, 6)
        assert Point(3, 4) - Point(1, 2) == Point(2, 2)

    def test_point_is_zero(self) -> None:
        """Test zero offset detection."""
        assert Point(0.0, 0.0).is_zero()
        assert not Point(0.0, 1e-9).is_zero()

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(100.0, 200.0)
        assert Point.from_dict(p1.to_dict()) == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 150.0  # type: ignore

    def test_point_hashable(self) -> None:
        """Test that points can be used in sets and dicts."""
        assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2


class TestSegment:
    """Tests for Segment class."""

    def test_default_handles_are_zero(self) -> None:
        """Test that a bare segment is a polygon vertex."""
        s = Segment(Point(1, 1))
        assert s.handle_in.is_zero()
        assert s.handle_out.is_zero()

    def test_segment_serialization(self) -> None:
        """Test segment serialization keeps handles."""
        s = Segment(Point(1, 1), Point(-0.5, 0), Point(0.5, 0))
        assert Segment.from_dict(s.to_dict()) == s


class TestContour:
    """Tests for Contour class."""

    def test_from_points(self) -> None:
        """Test polygon construction."""
        contour = Contour.from_points([(0, 0), (1, 0), (1, 1), (0, 1)])
        assert len(contour) == 4
        assert contour.segments[2].point == Point(1.0, 1.0)

    def test_curves_close_back_to_start(self) -> None:
        """Test that the last curve ends at the first vertex."""
        contour = Contour.from_points([(0, 0), (1, 0), (1, 1)])
        curves = contour.curves()
        assert len(curves) == 3
        assert curves[-1] == ((1.0, 1.0), (1.0, 1.0), (0.0, 0.0), (0.0, 0.0))

    def test_curves_include_handles(self) -> None:
        """Test that handle offsets become absolute control points."""
        circle = unit_circle()
        p0, c1, c2, p3 = circle.curves()[0]
        assert p0 == (1.0, 0.0)
        assert c1 == pytest.approx((1.0, KAPPA))
        assert c2 == pytest.approx((KAPPA, 1.0))
        assert p3 == (0.0, 1.0)

    def test_signed_area_ccw_positive(self) -> None:
        """Test that counter-clockwise contours have positive area."""
        contour = Contour.from_points([(0, 0), (2, 0), (2, 2), (0, 2)])
        assert contour.signed_area() == pytest.approx(4.0)
        assert not contour.is_clockwise()

    def test_signed_area_cw_negative(self) -> None:
        """Test that clockwise contours have negative area."""
        contour = Contour.from_points([(0, 0), (0, 2), (2, 2), (2, 0)])
        assert contour.signed_area() == pytest.approx(-4.0)
        assert contour.is_clockwise()

    def test_circle_area(self) -> None:
        """Test the area of a Bezier circle against pi."""
        assert unit_circle().signed_area() == pytest.approx(3.14159, rel=1e-3)

    def test_bounding_box(self) -> None:
        """Test bounding box of a curved contour."""
        box = unit_circle(1.0, 2.0).bounding_box()
        assert box == pytest.approx((0.0, 1.0, 2.0, 3.0))

    def test_contains_point(self) -> None:
        """Test point containment."""
        contour = Contour.from_points([(0, 0), (2, 0), (2, 2), (0, 2)])
        assert contour.contains_point(1, 1)
        assert not contour.contains_point(3, 1)

    def test_reversed(self) -> None:
        """Test reversal flips winding and keeps the first vertex."""
        circle = unit_circle()
        rev = circle.reversed()
        assert rev.segments[0].point == circle.segments[0].point
        assert rev.segments[1].point == circle.segments[3].point
        assert rev.signed_area() == pytest.approx(-circle.signed_area())

    def test_reversed_swaps_handles(self) -> None:
        """Test that the reversed curves are the original curves backwards."""
        circle = unit_circle()
        last = circle.reversed().curves()[-1]
        first = circle.curves()[0]
        assert last == tuple(reversed(first))

    def test_contour_serialization(self) -> None:
        """Test contour serialization and deserialization."""
        circle = unit_circle()
        restored = Contour.from_dict(circle.to_dict())
        assert restored.segments == circle.segments


class TestRegion:
    """Tests for Region class."""

    @pytest.fixture
    def square_with_hole(self) -> Region:
        """Create a 4x4 square with a 2x2 clockwise hole."""
        return Region.from_polygons(
            [
                [(0, 0), (4, 0), (4, 4), (0, 4)],
                [(1, 1), (1, 3), (3, 3), (3, 1)],
            ]
        )

    def test_empty_region(self) -> None:
        """Test empty region detection."""
        assert Region().is_empty()
        assert Region().segment_count == 0

    def test_empty_region_area_is_float(self) -> None:
        area = Region().area()
        assert isinstance(area, float)
        assert area == 0.0

    def test_segment_count(self, square_with_hole: Region) -> None:
        """Test segment count across contours."""
        assert square_with_hole.segment_count == 8

    def test_area_subtracts_holes(self, square_with_hole: Region) -> None:
        """Test that hole area is subtracted."""
        assert square_with_hole.area() == pytest.approx(12.0)

    def test_contains_point_even_odd(self, square_with_hole: Region) -> None:
        """Test containment across a hole."""
        assert square_with_hole.contains_point(0.5, 0.5)
        assert not square_with_hole.contains_point(2, 2)
        assert not square_with_hole.contains_point(5, 5)

    def test_bounding_box(self, square_with_hole: Region) -> None:
        """Test region bounding box."""
        assert square_with_hole.bounding_box() == pytest.approx((0, 0, 4, 4))

    def test_copy_is_independent(self, square_with_hole: Region) -> None:
        """Test that copy does not share contour lists."""
        clone = square_with_hole.copy()
        clone.contours.pop()
        clone.contours[0].segments.pop()
        assert len(square_with_hole.contours) == 2
        assert len(square_with_hole.contours[0]) == 4

    def test_reversed(self, square_with_hole: Region) -> None:
        """Test that reversing negates the area."""
        assert square_with_hole.reversed().area() == pytest.approx(-12.0)

    def test_region_serialization(self, square_with_hole: Region) -> None:
        """Test region serialization and deserialization."""
        restored = Region.from_dict(square_with_hole.to_dict())
        assert restored.area() == pytest.approx(12.0)
        assert len(restored.contours) == 2
