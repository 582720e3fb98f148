"""Domain models for pathbool.

This module contains the geometric value types that form the public
input and output of boolean operations. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable for inter-process communication (batch processing)
- Drawable through the fontTools pen protocol

Key classes:
- Point: A 2D point or handle offset
- Segment: A boundary vertex with its Bezier handles
- Contour: A closed sub-contour of segments
- Region: A compound region made of one or more contours
"""

from pathbool.domain.contour import Contour, Point, Segment
from pathbool.domain.region import Region

__all__: list[str] = [
    "Point",
    "Segment",
    "Contour",
    "Region",
]
