"""Data types for the selection subsystem."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class SelectionStats:
    """Mutable work counters threaded through one selection call.

    Attributes:
        comparisons: Comparator invocations (only counted by
            :class:`~floydrivest.selection.selector.FloydRivestSelector`).
        swaps: Element swaps, no-op swaps included.
        partition_passes: Hoare partition passes over all recursion levels.
        sample_recursions: Sub-sample recursive calls.
        max_depth: Deepest sub-sample recursion reached (0 = none).
    """

    comparisons: int = 0
    swaps: int = 0
    partition_passes: int = 0
    sample_recursions: int = 0
    max_depth: int = 0


@dataclass(frozen=True, slots=True)
class SelectionResult:
    """Result of an instrumented selection.

    Attributes:
        rank: Target rank that now holds its order statistic.
        value: The element at ``rank`` after selection.
        diagnostics: Work counters and timing for the call.
    """

    rank: int
    value: Any
    diagnostics: dict[str, Any]
