"""Exception hierarchy for pathbool."""


class PathBoolError(Exception):
    """Base exception for all pathbool errors."""

    pass


class GeometryError(PathBoolError):
    """Errors in geometric calculations or geometric input."""

    pass


class DegenerateGeometryError(GeometryError):
    """Numerical breakdown: a coordinate became NaN or infinite."""

    def __init__(self, operation: str, value: object) -> None:
        self.operation = operation
        self.value = value
        super().__init__(f"Non-finite geometry produced by {operation}: {value!r}")


class UnsupportedInputError(GeometryError):
    """Input regions fall outside what the boolean algorithm supports.

    Raised for self-intersecting operands and, when strict coincidence
    handling is enabled, for operands whose boundaries coincide.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Unsupported input: {reason}")


class GraphError(PathBoolError):
    """Errors related to the boundary intersection graph."""

    pass


class GraphConsistencyError(GraphError):
    """The intersection graph's connectivity is broken.

    Raised by contour extraction when a walk dead-ends, re-enters a node,
    fails to close within the edge count, or leaves a surviving edge unvisited.
    """

    def __init__(self, message: str, node_id: int | None = None) -> None:
        self.node_id = node_id
        super().__init__(message)
