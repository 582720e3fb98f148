"""Configuration settings for pathbool."""

from pathlib import Path

from pydantic import BaseModel, Field


class GeometryConfig(BaseModel):
    """Numerical tolerances used by the intersection graph.

    Tolerances are absolute and do not scale with the input; callers working
    in large coordinate spaces (font units, millimetres) may want to raise
    them accordingly.
    """

    flatness_tolerance: float = Field(
        default=1e-5,
        gt=0.0,
        le=1.0,
        description="Flatness tolerance for recursive curve subdivision during intersection",
    )
    parameter_tolerance: float = Field(
        default=1e-6,
        gt=0.0,
        le=1e-2,
        description="Curve parameter distance below which positions coincide (endpoints, ties)",
    )
    duplicate_tolerance: float = Field(
        default=1e-4,
        gt=0.0,
        le=1e-1,
        description="Parameter distance below which two crossings of one curve pair are the same",
    )
    coincidence_tolerance: float = Field(
        default=1e-6,
        gt=0.0,
        le=1.0,
        description="Distance below which a boundary point lies on another boundary",
    )
    min_contour_area: float = Field(
        default=1e-9,
        ge=0.0,
        description="Result contours with smaller absolute area are dropped",
    )
    max_subdivision_depth: int = Field(
        default=48,
        ge=8,
        le=64,
        description="Recursion cap for curve/curve intersection",
    )


class ValidationConfig(BaseModel):
    """Input validation performed before the graph is built."""

    check_self_intersection: bool = Field(
        default=True,
        description="Reject operands whose boundary crosses itself",
    )
    check_coincidence: bool = Field(
        default=True,
        description="Detect operands with coincident boundaries",
    )
    strict_coincidence: bool = Field(
        default=False,
        description="Raise on coincident operands instead of resolving them by identity",
    )


class ContainmentConfig(BaseModel):
    """Point-in-region rule used by the edge classifier."""

    even_odd: bool = Field(
        default=True,
        description="Use the even-odd rule (False = non-zero winding)",
    )


class ProcessingConfig(BaseModel):
    """Configuration for batch processing."""

    max_workers: int | None = Field(
        default=None,
        description="Max worker processes (None = auto)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class BooleanSettings(BaseModel):
    """Main settings for boolean operations."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    containment: ContainmentConfig = Field(default_factory=ContainmentConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> BooleanSettings:
    """Get default settings."""
    return BooleanSettings()
