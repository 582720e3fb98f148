"""Logging utilities for pathbool."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class OperationStats:
    """Statistics from a single boolean operation."""

    operation: str = ""
    edges_a: int = 0
    edges_b: int = 0
    intersections: int = 0
    edges_after_split: int = 0
    discarded_edges: int = 0
    merged_nodes: int = 0
    swapped_nodes: int = 0
    contours: int = 0
    dropped_contours: int = 0
    shortcut: str | None = None
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_ms(self) -> float:
        """Calculate operation duration in milliseconds."""
        if self.start_time is not None and self.end_time is not None:
            return (self.end_time - self.start_time) * 1000
        return 0.0


@dataclass
class ProcessingStats:
    """Statistics from a batch processing run."""

    processed_count: int = 0
    error_count: int = 0
    errors: list[tuple[int, str]] = field(default_factory=list)
    timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("pathbool")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for a library module.

    The logger wraps the stdlib logger of the same name, so nothing below
    WARNING is emitted until configure_logging() installs handlers.

    Args:
        name: Logger name, usually the module's __name__

    Returns:
        structlog logger bound to the stdlib logger
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)


class OperationLogger:
    """Logger for tracking the stages of one boolean operation."""

    def __init__(self, logger: structlog.stdlib.BoundLogger, stats: OperationStats) -> None:
        self._logger = logger
        self._stats = stats

    def log_graph_built(self, edges_a: int, edges_b: int) -> None:
        """Log graph construction."""
        self._stats.edges_a = edges_a
        self._stats.edges_b = edges_b
        self._logger.debug("Graph built", edges_a=edges_a, edges_b=edges_b)

    def log_intersections(self, count: int) -> None:
        """Log intersection discovery."""
        self._stats.intersections = count
        self._logger.debug("Intersections resolved", intersections=count)

    def log_split(self, edge_count: int) -> None:
        """Log edge splitting."""
        self._stats.edges_after_split = edge_count
        self._logger.debug("Edges split", edges=edge_count)

    def log_classified(self, discarded: int) -> None:
        """Log edge classification."""
        self._stats.discarded_edges = discarded
        self._logger.debug("Edges classified", discarded=discarded)

    def log_merged(self, merged: int, swapped: int) -> None:
        """Log intersection node merging."""
        self._stats.merged_nodes = merged
        self._stats.swapped_nodes = swapped
        self._logger.debug("Nodes merged", merged=merged, swapped=swapped)

    def log_shortcut(self, reason: str) -> None:
        """Log an operation resolved without building the graph."""
        self._stats.shortcut = reason
        self._logger.debug("Operation short-circuited", reason=reason)

    def log_complete(self, contours: int, dropped: int) -> None:
        """Log operation completion."""
        self._stats.contours = contours
        self._stats.dropped_contours = dropped
        self._logger.info(
            "Boolean operation complete",
            operation=self._stats.operation,
            contours=contours,
            dropped=dropped,
            intersections=self._stats.intersections,
            duration_ms=round(self._stats.duration_ms, 2),
        )

    @property
    def stats(self) -> OperationStats:
        """Get the statistics being recorded."""
        return self._stats
