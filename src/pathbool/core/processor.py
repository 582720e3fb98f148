"""Parallel batch processing of boolean operations.

Every pairwise operation builds its own graph, so independent pairs can
run in separate worker processes via ProcessPoolExecutor.

Key components:
- process_pair: Top-level picklable function for parallel execution
- BooleanProcessor: Orchestrator that fans pairs out and collects results
"""

import time
import traceback
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import asdict, dataclass, field
from typing import Any

from pathbool.config import BooleanSettings, get_default_settings
from pathbool.core.boolean import compute_boolean
from pathbool.core.classifier import BooleanOperator
from pathbool.domain import Region
from pathbool.utils import OperationStats, ProcessingStats, configure_logging


def process_pair(
    a_dict: dict[str, Any],
    b_dict: dict[str, Any],
    operation: str,
    settings_dict: dict[str, Any],
) -> dict[str, Any]:
    """Run one boolean operation on serialized regions.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.

    Args:
        a_dict: Serialized first operand (from Region.to_dict())
        b_dict: Serialized second operand
        operation: BooleanOperator value ("union", "intersection", "subtraction")
        settings_dict: Serialized BooleanSettings

    Returns:
        Dictionary containing either:
        - Success: {"region": region_dict, "stats": stats_dict, "duration_ms": float}
        - Error: {"error": str, "error_type": str, "traceback": str, "duration_ms": float}
    """
    start_time = time.time()

    try:
        region_a = Region.from_dict(a_dict)
        region_b = Region.from_dict(b_dict)
        settings = BooleanSettings.model_validate(settings_dict)

        stats = OperationStats()
        result = compute_boolean(region_a, region_b, BooleanOperator(operation), settings, stats)

        duration_ms = (time.time() - start_time) * 1000
        return {
            "region": result.to_dict(),
            "stats": asdict(stats),
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "error": str(e),
            "error_type": type(e).__name__,
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


@dataclass
class BatchResult:
    """Results of a batch run, in input order.

    Attributes:
        regions: Result region per pair (None where the operation failed)
        operation_stats: Per-pair statistics (None where the operation failed)
        stats: Aggregate processing statistics
    """

    regions: list[Region | None] = field(default_factory=list)
    operation_stats: list[OperationStats | None] = field(default_factory=list)
    stats: ProcessingStats = field(default_factory=ProcessingStats)

    @property
    def succeeded(self) -> bool:
        """True if every pair produced a region."""
        return self.stats.error_count == 0


class BooleanProcessor:
    """Runs many independent boolean operations in parallel.

    Example:
        processor = BooleanProcessor(get_default_settings())
        batch = processor.process([(a1, b1), (a2, b2)], "union", max_workers=4)
        for region in batch.regions:
            ...
    """

    def __init__(self, settings: BooleanSettings | None = None) -> None:
        """Initialize the processor.

        Args:
            settings: Settings shared by every operation (defaults if None)
        """
        self.settings = settings or get_default_settings()
        self.logger = configure_logging(
            log_file=self.settings.logging.log_file,
            console_level=self.settings.logging.log_level,
            file_level=self.settings.logging.file_log_level,
            quiet=False,
        )

    def process(
        self,
        pairs: list[tuple[Region, Region]],
        operation: BooleanOperator | str,
        max_workers: int | None = None,
    ) -> BatchResult:
        """Apply one operation to every pair of regions.

        A failing pair does not stop the batch; its slot holds None and the
        error is recorded in the statistics.

        Args:
            pairs: (A, B) operand pairs
            operation: Operation applied to every pair
            max_workers: Maximum worker processes (None = settings value, then auto-detect)

        Returns:
            BatchResult with regions in input order

        Raises:
            KeyboardInterrupt: If processing is cancelled by user
        """
        operation = BooleanOperator(operation)
        if max_workers is None:
            max_workers = self.settings.processing.max_workers

        batch = BatchResult(
            regions=[None] * len(pairs),
            operation_stats=[None] * len(pairs),
        )
        stats = batch.stats
        stats.start_time = time.time()

        self.logger.info(
            "Starting batch processing",
            operation=operation.value,
            pair_count=len(pairs),
            max_workers=max_workers,
        )

        if pairs:
            self._process_parallel(pairs, operation, max_workers, batch)

        stats.end_time = time.time()
        self.logger.info(
            "Batch processing complete",
            processed=stats.processed_count,
            errors=stats.error_count,
            duration_seconds=round(stats.duration_seconds, 2),
        )
        return batch

    def _process_parallel(
        self,
        pairs: list[tuple[Region, Region]],
        operation: BooleanOperator,
        max_workers: int | None,
        batch: BatchResult,
    ) -> None:
        stats = batch.stats
        settings_dict = self.settings.model_dump()
        pending_futures: dict = {}

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for index, (region_a, region_b) in enumerate(pairs):
                future = executor.submit(
                    process_pair,
                    region_a.to_dict(),
                    region_b.to_dict(),
                    operation.value,
                    settings_dict,
                )
                pending_futures[future] = index

            try:
                for future in as_completed(pending_futures):
                    index = pending_futures.pop(future)

                    try:
                        result = future.result()
                    except Exception as e:
                        # Executor-level error
                        self._record_error(stats, index, str(e), type(e).__name__, traceback.format_exc())
                        continue

                    if "error" in result:
                        self._record_error(
                            stats, index, result["error"], result["error_type"], result.get("traceback")
                        )
                        continue

                    batch.regions[index] = Region.from_dict(result["region"])
                    batch.operation_stats[index] = OperationStats(**result["stats"])
                    stats.processed_count += 1
                    stats.timings_ms.append(result["duration_ms"])
                    self.logger.debug(
                        "Pair processed",
                        index=index,
                        contours=len(batch.regions[index].contours),
                        duration_ms=round(result["duration_ms"], 2),
                    )

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                executor.shutdown(wait=True, cancel_futures=True)
                raise

    def _record_error(
        self,
        stats: ProcessingStats,
        index: int,
        error: str,
        error_type: str,
        tb: str | None,
    ) -> None:
        stats.error_count += 1
        stats.errors.append((index, f"{error_type}: {error}"))
        self.logger.error(
            "Pair processing failed",
            index=index,
            error=error,
            error_type=error_type,
            traceback=tb,
        )
