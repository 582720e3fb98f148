"""Core geometric types for boundary representation.

This module defines the fundamental geometric types:
- Point: A 2D point (also used for handle offsets)
- Segment: A boundary vertex with incoming and outgoing handles
- Contour: A closed sequence of segments

A contour's curves run from each segment to the next, closing back to the
first one. The curve between segments ``s0`` and ``s1`` has the control
points ``s0.point``, ``s0.point + s0.handle_out``, ``s1.point + s1.handle_in``
and ``s1.point``; when both handles are zero the curve is a straight line.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from fontTools.pens.areaPen import AreaPen
from fontTools.pens.basePen import AbstractPen
from fontTools.pens.boundsPen import BoundsPen
from fontTools.pens.pointInsidePen import PointInsidePen

Coord = tuple[float, float]
CurveValues = tuple[Coord, Coord, Coord, Coord]


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts. Also used for handle
    offsets, which are relative to their segment's point.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> Coord:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def is_zero(self) -> bool:
        """Check whether this is a zero offset."""
        return self.x == 0 and self.y == 0

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary."""
        return cls(x=data["x"], y=data["y"])


ZERO = Point(0.0, 0.0)


@dataclass(frozen=True, slots=True)
class Segment:
    """A boundary vertex with its Bezier handles.

    Attributes:
        point: Position of the vertex
        handle_in: Offset of the incoming control point, relative to point
        handle_out: Offset of the outgoing control point, relative to point
    """

    point: Point
    handle_in: Point = ZERO
    handle_out: Point = ZERO

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "point": self.point.to_dict(),
            "handle_in": self.handle_in.to_dict(),
            "handle_out": self.handle_out.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Segment":
        """Deserialize from dictionary."""
        return cls(
            point=Point.from_dict(data["point"]),
            handle_in=Point.from_dict(data["handle_in"]),
            handle_out=Point.from_dict(data["handle_out"]),
        )


@dataclass
class Contour:
    """A closed sub-contour of a region boundary.

    Attributes:
        segments: Boundary vertices in traversal order
    """

    segments: list[Segment]
    _cached_area: float | None = field(default=None, repr=False, init=False, compare=False)

    @classmethod
    def from_points(cls, points: Iterable[tuple[float, float]]) -> "Contour":
        """Build a polygonal contour (straight segments only).

        Args:
            points: Polygon vertices as (x, y) tuples

        Returns:
            Contour with zero handles on every segment
        """
        return cls(segments=[Segment(Point(float(x), float(y))) for x, y in points])

    def __len__(self) -> int:
        return len(self.segments)

    def curves(self) -> list[CurveValues]:
        """Get the control points of every boundary curve.

        Returns:
            One (p0, c1, c2, p3) tuple per segment, the last one closing the
            contour back to the first segment
        """
        n = len(self.segments)
        result: list[CurveValues] = []
        for i in range(n):
            s0 = self.segments[i]
            s1 = self.segments[(i + 1) % n]
            result.append(
                (
                    s0.point.to_tuple(),
                    (s0.point + s0.handle_out).to_tuple(),
                    (s1.point + s1.handle_in).to_tuple(),
                    s1.point.to_tuple(),
                )
            )
        return result

    def draw(self, pen: AbstractPen) -> None:
        """Draw the contour with a fontTools pen.

        Straight curves are drawn with lineTo, all others with curveTo.

        Args:
            pen: Any fontTools segment pen
        """
        if not self.segments:
            return

        pen.moveTo(self.segments[0].point.to_tuple())
        n = len(self.segments)
        for i in range(n):
            s0 = self.segments[i]
            s1 = self.segments[(i + 1) % n]
            if s0.handle_out.is_zero() and s1.handle_in.is_zero():
                pen.lineTo(s1.point.to_tuple())
            else:
                pen.curveTo(
                    (s0.point + s0.handle_out).to_tuple(),
                    (s1.point + s1.handle_in).to_tuple(),
                    s1.point.to_tuple(),
                )
        pen.closePath()

    def signed_area(self) -> float:
        """Calculate the exact signed area enclosed by the contour.

        The sign indicates winding direction:
        - Positive area: counter-clockwise winding
        - Negative area: clockwise winding

        Result is cached for efficiency.

        Returns:
            Signed area of the contour
        """
        if self._cached_area is not None:
            return self._cached_area

        pen = AreaPen()
        self.draw(pen)
        self._cached_area = pen.value
        return self._cached_area

    def is_clockwise(self) -> bool:
        """Check whether the contour winds clockwise."""
        return self.signed_area() < 0

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate the tight bounding box of the contour's curves.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        pen = BoundsPen(None)
        self.draw(pen)
        if pen.bounds is None:
            return (0.0, 0.0, 0.0, 0.0)
        return pen.bounds

    def contains_point(self, x: float, y: float, even_odd: bool = True) -> bool:
        """Check if a point lies inside the contour.

        Args:
            x: X coordinate of point to test
            y: Y coordinate of point to test
            even_odd: Use the even-odd rule instead of non-zero winding

        Returns:
            True if point is inside contour, False otherwise
        """
        if len(self.segments) < 2:
            return False

        pen = PointInsidePen(None, (x, y), evenOdd=even_odd)
        self.draw(pen)
        return pen.getResult()

    def reversed(self) -> "Contour":
        """Get the same contour traversed in the opposite direction.

        Handles swap roles: a segment's outgoing handle becomes its
        incoming handle and vice versa.

        Returns:
            New contour with reversed direction
        """
        if not self.segments:
            return Contour(segments=[])

        ordered = [self.segments[0]] + list(reversed(self.segments[1:]))
        return Contour(
            segments=[
                Segment(s.point, handle_in=s.handle_out, handle_out=s.handle_in)
                for s in ordered
            ]
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"segments": [s.to_dict() for s in self.segments]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Contour":
        """Deserialize from dictionary."""
        return cls(segments=[Segment.from_dict(s) for s in data["segments"]])
