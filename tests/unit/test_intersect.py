"""Unit tests for the curve/curve intersection locator."""

import math

import pytest

from pathbool.core.intersect import CurveIntersection, intersect_curves

HUMP = ((0.0, 0.0), (0.0, 2.0), (2.0, 2.0), (2.0, 0.0))
ARC = ((1.0, 0.0), (1.0, 0.5522847498), (0.5522847498, 1.0), (0.0, 1.0))


def line(p0: tuple[float, float], p1: tuple[float, float]):
    """Straight curve between two points."""
    return (p0, p0, p1, p1)


class TestStraightLines:
    """Intersections between straight curves."""

    def test_single_crossing(self) -> None:
        hits = list(intersect_curves(line((0.0, 0.0), (2.0, 2.0)), line((0.0, 2.0), (2.0, 0.0))))
        assert len(hits) == 1
        assert hits[0].point == pytest.approx((1.0, 1.0))
        assert hits[0].parameter_a == pytest.approx(0.5)
        assert hits[0].parameter_b == pytest.approx(0.5)

    def test_disjoint(self) -> None:
        hits = list(intersect_curves(line((0.0, 0.0), (1.0, 0.0)), line((0.0, 1.0), (1.0, 1.0))))
        assert hits == []

    def test_crossing_at_start_is_suppressed(self) -> None:
        """A crossing at a curve start belongs to the previous curve."""
        a = line((1.0, 0.0), (1.0, 2.0))
        b = line((0.0, 0.0), (2.0, 0.0))
        assert list(intersect_curves(a, b)) == []

    def test_crossing_at_end_is_reported(self) -> None:
        a = line((1.0, 2.0), (1.0, 0.0))
        b = line((0.0, 0.0), (2.0, 0.0))
        hits = list(intersect_curves(a, b))
        assert len(hits) == 1
        assert hits[0].parameter_a == 1.0
        assert hits[0].parameter_b == pytest.approx(0.5)


class TestCurves:
    """Intersections involving cubic curves."""

    def test_line_crosses_arc(self) -> None:
        hits = list(intersect_curves(line((0.0, 0.0), (1.0, 1.0)), ARC))
        assert len(hits) == 1
        x, y = hits[0].point
        assert x == pytest.approx(y, abs=1e-4)
        assert math.hypot(x, y) == pytest.approx(1.0, abs=1e-3)

    def test_two_crossings(self) -> None:
        """A horizontal line cuts the hump twice."""
        hits = list(intersect_curves(HUMP, line((-1.0, 1.0), (3.0, 1.0))))
        assert len(hits) == 2
        params = sorted(hit.parameter_a for hit in hits)
        root = math.sqrt(1.0 / 3.0)
        assert params == pytest.approx([(1 - root) / 2, (1 + root) / 2], abs=1e-4)
        for hit in hits:
            assert hit.point[1] == pytest.approx(1.0, abs=1e-5)

    def test_crossing_on_subdivision_seam_reported_once(self) -> None:
        """The hump's apex is where the first halving splits it."""
        hits = list(intersect_curves(HUMP, line((1.0, -1.0), (1.0, 3.0))))
        assert len(hits) == 1
        assert hits[0].parameter_a == pytest.approx(0.5, abs=1e-5)
        assert hits[0].parameter_b == pytest.approx(0.625, abs=1e-5)

    def test_duplicate_tolerance_merges_distant_solutions(self) -> None:
        """A wide duplicate window folds the hump's two crossings into one."""
        cut = line((-1.0, 1.0), (3.0, 1.0))
        assert len(list(intersect_curves(HUMP, cut, duplicate_tolerance=0.5))) == 2
        hits = list(intersect_curves(HUMP, cut, duplicate_tolerance=0.6))
        assert len(hits) == 1

    def test_depth_cap_uses_chords(self) -> None:
        """At the recursion cap a curve is treated as its chord."""
        hits = list(intersect_curves(ARC, line((0.0, 0.5), (2.0, 0.5)), max_depth=0))
        assert len(hits) == 1
        assert hits[0].point == pytest.approx((0.5, 0.5))


class TestGenerator:
    """The locator is lazy and restartable."""

    def test_returns_fresh_generator(self) -> None:
        a = line((0.0, 0.0), (2.0, 2.0))
        b = line((0.0, 2.0), (2.0, 0.0))
        first = intersect_curves(a, b)
        assert isinstance(next(first), CurveIntersection)
        assert len(list(intersect_curves(a, b))) == 1

    def test_results_are_frozen(self) -> None:
        hit = next(intersect_curves(line((0.0, 0.0), (2.0, 2.0)), line((0.0, 2.0), (2.0, 0.0))))
        with pytest.raises(AttributeError):
            hit.parameter_a = 0.0  # type: ignore
