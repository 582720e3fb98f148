"""pathbool - Boolean operations on Bezier-bounded regions.

pathbool computes the union, intersection and difference of two closed
planar regions whose boundaries are sequences of cubic Bezier curves and
straight lines. Regions may be compound (several sub-contours, holes).

Example:
    >>> from pathbool import Region, union
    >>> a = Region.from_polygons([[(0, 0), (1, 0), (1, 1), (0, 1)]])
    >>> b = Region.from_polygons([[(0.5, 0.5), (1.5, 0.5), (1.5, 1.5), (0.5, 1.5)]])
    >>> round(union(a, b).area(), 6)
    1.75
"""

from pathbool.core.boolean import compute_boolean, intersect, subtract, union
from pathbool.core.classifier import BooleanOperator
from pathbool.domain import Contour, Point, Region, Segment

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = [
    "BooleanOperator",
    "Contour",
    "Point",
    "Region",
    "Segment",
    "__author__",
    "__version__",
    "compute_boolean",
    "intersect",
    "subtract",
    "union",
]
