"""Contour nesting analysis and orientation normalization.

The intersection graph only re-links crossings correctly when both
operands follow the same winding convention. This module determines each
sub-contour's nesting depth inside its own region and re-orients it:

- Even depth (outer boundaries, islands inside holes): counter-clockwise
- Odd depth (holes): clockwise

Nesting is established with point-in-contour tests on a sample point taken
from the middle of each contour's first curve.
"""

from dataclasses import dataclass

from pathbool.core.geometry import evaluate_curve
from pathbool.domain import Contour, Region


@dataclass
class ContourNode:
    """A node in the contour nesting tree.

    Attributes:
        index: Index of this contour in the region's contour list
        parent: Index of the innermost enclosing contour (None if top-level)
        depth: Nesting depth (0 for top-level)
        clockwise: Current winding of the contour
    """

    index: int
    parent: int | None
    depth: int
    clockwise: bool

    @property
    def is_hole(self) -> bool:
        """Odd-depth contours bound holes."""
        return self.depth % 2 == 1


def analyze_nesting(region: Region) -> list[ContourNode]:
    """Build the nesting tree of a region's contours.

    Args:
        region: Region to analyze

    Returns:
        One ContourNode per contour, in contour order
    """
    samples = [_sample_point(c) for c in region.contours]
    areas = [abs(c.signed_area()) for c in region.contours]

    nodes: list[ContourNode] = []
    for idx, contour in enumerate(region.contours):
        sample = samples[idx]
        containers = [
            other_idx
            for other_idx, other in enumerate(region.contours)
            if other_idx != idx
            and sample is not None
            and other.contains_point(sample[0], sample[1], even_odd=True)
        ]
        # The innermost container is the smallest one
        parent = min(containers, key=lambda i: areas[i]) if containers else None
        nodes.append(
            ContourNode(
                index=idx,
                parent=parent,
                depth=len(containers),
                clockwise=contour.is_clockwise(),
            )
        )

    return nodes


def normalize_orientation(region: Region) -> Region:
    """Re-orient contours so outer boundaries wind counter-clockwise and holes clockwise.

    Contour order is preserved, so the base contour stays first.

    Args:
        region: Region to normalize (not modified)

    Returns:
        New region with consistent winding
    """
    nodes = analyze_nesting(region)
    contours: list[Contour] = []
    for node, contour in zip(nodes, region.contours):
        if node.clockwise != node.is_hole:
            contours.append(contour.reversed())
        else:
            contours.append(Contour(segments=list(contour.segments)))
    return Region(contours=contours)


def _sample_point(contour: Contour) -> tuple[float, float] | None:
    curves = contour.curves()
    if not curves:
        return None
    return evaluate_curve(curves[0], 0.5)
