"""Diagnostic logger for per-call selection events.

Uses the standard ``logging`` module with the ``"floydrivest"`` logger.
No ``print()`` statements. Supports three verbosity levels and an
in-memory diagnostic mode for post-hoc analysis.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from floydrivest.config import FloydRivestConfig
    from floydrivest.logging.types import SelectionRecord

logger = logging.getLogger("floydrivest")


class SelectionLogger:
    """Per-call diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per selection with rank, window size and
        work counters.

        ``"full"``: Full JSON dump of all record fields.

    Diagnostic mode stores all records in memory for post-hoc analysis via
    ``get_diagnostic_data()`` and ``get_summary_stats()``.
    """

    def __init__(self, config: FloydRivestConfig) -> None:
        """Initialize the logger from configuration.

        Args:
            config: Configuration providing ``log_level`` and ``diagnostic_mode``.
        """
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[SelectionRecord] = []

    def log_selection(self, record: SelectionRecord) -> None:
        """Log a single selection event.

        Args:
            record: Immutable record of the selection call.
        """
        if self._diagnostic_mode:
            self._records.append(record)

        if self._log_level == "none":
            return

        if self._log_level == "summary":
            logger.info(
                "rank=%d window=%d/%d comparisons=%d swaps=%d passes=%d "
                "samples=%d depth=%d elapsed=%.3fms",
                record.rank,
                record.window_size,
                record.length,
                record.comparisons,
                record.swaps,
                record.partition_passes,
                record.sample_recursions,
                record.max_depth,
                record.elapsed_ms,
            )
        elif self._log_level == "full":
            logger.info("selection_record: %s", json.dumps(asdict(record)))

    def get_diagnostic_data(self) -> list[SelectionRecord]:
        """Return all stored records (requires ``diagnostic_mode=True``)."""
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute summary statistics over all stored records.

        Returns:
            Dictionary with aggregate stats, or empty dict if no records.
        """
        if not self._records:
            return {}

        n = len(self._records)
        comparisons = [r.comparisons for r in self._records]
        elements = sum(r.window_size for r in self._records)
        elapsed = [r.elapsed_ms for r in self._records]
        return {
            "total_selections": n,
            "total_elements": elements,
            "mean_comparisons": sum(comparisons) / n,
            "comparisons_per_element": sum(comparisons) / elements,
            "mean_swaps": sum(r.swaps for r in self._records) / n,
            "mean_partition_passes": sum(r.partition_passes for r in self._records) / n,
            "max_depth": max(r.max_depth for r in self._records),
            "mean_elapsed_ms": sum(elapsed) / n,
            "max_elapsed_ms": max(elapsed),
        }
