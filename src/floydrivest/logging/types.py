"""Data types for the diagnostic logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SelectionRecord:
    """Immutable record of a single selection call.

    Attributes:
        timestamp_ns: Wall-clock time of the call (nanoseconds since epoch).
        elapsed_ms: Time spent inside the selection (milliseconds).
        length: Length of the whole buffer.
        window_size: Number of elements in the [left, right] window.
        rank: Target rank that was selected.
        comparisons: Comparator invocations.
        swaps: Element swaps performed (no-op swaps included).
        partition_passes: Hoare partition passes over all recursion levels.
        sample_recursions: Sub-sample recursive calls.
        max_depth: Deepest sub-sample recursion reached (0 = none).
    """

    # Timing
    timestamp_ns: int
    elapsed_ms: float

    # Call shape
    length: int
    window_size: int
    rank: int

    # Work counters
    comparisons: int
    swaps: int
    partition_passes: int
    sample_recursions: int
    max_depth: int
