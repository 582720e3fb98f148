"""Core algorithms for pathbool.

This module contains the boolean operation pipeline:

- Geometry operations (curve evaluation, subdivision, flatness, intersections)
- Input preparation (finiteness, self-intersection, coincidence, winding)
- The boundary intersection graph and its stages
- Parallel batch processing

Graph stages, in pipeline order:
- build_graph: One node per vertex, one edge per boundary curve
- resolve_intersections: Record every crossing between the operands
- split_edges: Split edges at their crossings
- classify_edges: Discard edges the operator rejects
- merge_nodes: Fuse each crossing's two nodes into one
- extract_contours: Walk the surviving edges into closed contours

Key functions:
- compute_boolean: Run the whole pipeline for one operator
- union, intersect, subtract: Operator shortcuts
- intersect_curves: Lazy curve/curve intersection
- process_pair: Picklable worker for batch runs

Key classes:
- CurveGraph: Arena of nodes and edges
- BooleanOperator: Union, intersection, subtraction
- BooleanProcessor: Runs many pairwise operations in parallel
"""

from pathbool.core.boolean import compute_boolean, intersect, subtract, union
from pathbool.core.builder import build_graph
from pathbool.core.classifier import BooleanOperator, classify_edge, classify_edges
from pathbool.core.extractor import extract_contours
from pathbool.core.geometry import (
    bezier_flatten,
    bounding_box,
    boxes_overlap,
    contains_point,
    distance_to_boundary,
    evaluate_curve,
    is_flat_enough,
    line_intersection,
    nearest_point_on_segment,
    region_area,
    subdivide_curve,
)
from pathbool.core.graph import CurveGraph, Edge, IdAllocator, Merged, Node, NodeKind, Simple
from pathbool.core.intersect import CurveIntersection, intersect_curves
from pathbool.core.merger import MergeResult, merge_nodes
from pathbool.core.orientation import ContourNode, analyze_nesting, normalize_orientation
from pathbool.core.processor import BatchResult, BooleanProcessor, process_pair
from pathbool.core.resolver import resolve_intersections
from pathbool.core.splitter import split_edges
from pathbool.core.validation import (
    check_finite,
    find_self_intersection,
    regions_coincide,
    validate_operand,
)

__all__ = [
    # Boolean operations
    "BooleanOperator",
    "compute_boolean",
    "intersect",
    "subtract",
    "union",
    # Geometry functions
    "CurveIntersection",
    "bezier_flatten",
    "bounding_box",
    "boxes_overlap",
    "contains_point",
    "distance_to_boundary",
    "evaluate_curve",
    "intersect_curves",
    "is_flat_enough",
    "line_intersection",
    "nearest_point_on_segment",
    "region_area",
    "subdivide_curve",
    # Input preparation
    "ContourNode",
    "analyze_nesting",
    "check_finite",
    "find_self_intersection",
    "normalize_orientation",
    "regions_coincide",
    "validate_operand",
    # Graph classes
    "CurveGraph",
    "Edge",
    "IdAllocator",
    "Merged",
    "Node",
    "NodeKind",
    "Simple",
    # Graph stages
    "MergeResult",
    "build_graph",
    "classify_edge",
    "classify_edges",
    "extract_contours",
    "merge_nodes",
    "resolve_intersections",
    "split_edges",
    # Processor classes
    "BatchResult",
    "BooleanProcessor",
    "process_pair",
]
