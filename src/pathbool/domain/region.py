"""Compound region representation.

A region is the closed planar area bounded by one or more closed
sub-contours. The first contour is the base (outer boundary of the first
component); the rest are holes or further outer components.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from fontTools.pens.basePen import AbstractPen
from fontTools.pens.boundsPen import BoundsPen
from fontTools.pens.pointInsidePen import PointInsidePen

from pathbool.domain.contour import Contour


@dataclass
class Region:
    """A closed planar region bounded by one or more sub-contours.

    Attributes:
        contours: Closed sub-contours; contours[0] is the base contour
    """

    contours: list[Contour] = field(default_factory=list)

    @classmethod
    def from_polygons(cls, polygons: Iterable[Sequence[tuple[float, float]]]) -> "Region":
        """Build a region from polygon vertex lists.

        Args:
            polygons: One vertex list per sub-contour

        Returns:
            Region made of straight-line contours
        """
        return cls(contours=[Contour.from_points(poly) for poly in polygons])

    @property
    def segment_count(self) -> int:
        """Total number of boundary curves over all sub-contours."""
        return sum(len(c.segments) for c in self.contours)

    def is_empty(self) -> bool:
        """Check if the region has no boundary at all."""
        return self.segment_count == 0

    def draw(self, pen: AbstractPen) -> None:
        """Draw every sub-contour with a fontTools pen."""
        for contour in self.contours:
            contour.draw(pen)

    def area(self) -> float:
        """Calculate the enclosed area.

        Sums the signed areas of all sub-contours, so holes wound opposite
        to their outer contour are subtracted.

        Returns:
            Signed area of the region
        """
        return sum((c.signed_area() for c in self.contours), 0.0)

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate the tight bounding box of the whole boundary.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        pen = BoundsPen(None)
        self.draw(pen)
        if pen.bounds is None:
            return (0.0, 0.0, 0.0, 0.0)
        return pen.bounds

    def contains_point(self, x: float, y: float, even_odd: bool = True) -> bool:
        """Check if a point lies inside the region.

        Args:
            x: X coordinate of point to test
            y: Y coordinate of point to test
            even_odd: Use the even-odd rule instead of non-zero winding

        Returns:
            True if point is inside, False otherwise
        """
        if self.is_empty():
            return False

        pen = PointInsidePen(None, (x, y), evenOdd=even_odd)
        self.draw(pen)
        return pen.getResult()

    def reversed(self) -> "Region":
        """Get the region with every sub-contour's direction reversed."""
        return Region(contours=[c.reversed() for c in self.contours])

    def copy(self) -> "Region":
        """Clone the region.

        Segments are immutable, so copying the containers is enough to
        make the clone independent of the original.
        """
        return Region(contours=[Contour(segments=list(c.segments)) for c in self.contours])

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"contours": [c.to_dict() for c in self.contours]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Region":
        """Deserialize from dictionary."""
        return cls(contours=[Contour.from_dict(c) for c in data["contours"]])
