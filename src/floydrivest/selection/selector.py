"""Floyd-Rivest selection.

Moves the k-th smallest element of a mutable sequence into position k and
leaves the sequence partitioned around it:

    buffer[i] <= buffer[k]  for left <= i < k
    buffer[k] <= buffer[j]  for k < j <= right

Each iteration of the outer loop optionally narrows the window by selecting
within a small sample sub-range first (recursively), then runs one Hoare
partition pass around the element currently stored at k. Expected time is
linear in the window size. The worst case is quadratic, and adversarial
inputs can push the sub-sample recursion toward a depth linear in the
window size; no explicit depth limit is imposed.
"""

from __future__ import annotations

import math
import operator
import time
from typing import TYPE_CHECKING, Any

import numpy as np

from floydrivest.config import (
    DEFAULT_SAMPLE_THRESHOLD,
    MIN_SAMPLE_THRESHOLD,
    FloydRivestConfig,
)
from floydrivest.exceptions import InvalidRangeError
from floydrivest.logging.logger import SelectionLogger
from floydrivest.logging.types import SelectionRecord
from floydrivest.selection.ordering import resolve_comparator
from floydrivest.selection.types import SelectionResult, SelectionStats

if TYPE_CHECKING:
    from collections.abc import Callable

    from floydrivest.selection.ordering import Comparator


def check_window(
    buffer: Any, k: int, left: int = 0, right: int | None = None
) -> tuple[int, int, int]:
    """Validate a selection request before the buffer is touched.

    Args:
        buffer: Sequence to select in.
        k: Target rank.
        left: First index of the window.
        right: Last index of the window (inclusive). ``None`` means the
            last index of the buffer.

    Returns:
        Tuple ``(left, k, right)`` as plain ints, with ``right`` resolved.

    Raises:
        InvalidRangeError: If the buffer is empty or not one-dimensional, or
            if ``0 <= left <= k <= right < len(buffer)`` does not hold.
    """
    if isinstance(buffer, np.ndarray) and buffer.ndim != 1:
        raise InvalidRangeError(f"Buffer must be one-dimensional, got ndim={buffer.ndim}")

    length = len(buffer)
    if length == 0:
        raise InvalidRangeError("Cannot select in an empty buffer")

    k = operator.index(k)
    left = operator.index(left)
    right = length - 1 if right is None else operator.index(right)
    if not 0 <= left <= k <= right < length:
        raise InvalidRangeError(
            f"Invalid selection window: need 0 <= left <= k <= right < {length}, "
            f"got left={left}, k={k}, right={right}"
        )
    return left, k, right


def sample_bounds(left: int, right: int, k: int) -> tuple[int, int]:
    """Compute the sample sub-range to recurse on before partitioning.

    The sub-range has size about ``0.5 * n**(2/3)`` and is shifted slightly
    toward the far side of the window, so that after selecting within it
    the (k - left + 1)-th smallest element is expected to land in the
    smaller side of the following partition.

    Bounds are truncated toward zero and clamped into ``[left, right]``
    with ``ll <= k <= rr``. The estimate only affects speed, never the
    correctness of the final result.

    Args:
        left: First index of the current window.
        right: Last index of the current window (inclusive).
        k: Target rank, inside the window.

    Returns:
        Tuple ``(ll, rr)`` of the inclusive sample sub-range.
    """
    n = right - left + 1
    i = k - left + 1
    z = math.log(n)
    s = 0.5 * math.exp(2.0 * z / 3.0)
    sd = 0.5 * math.sqrt(z * s * (n - s) / n)
    if i - n / 2 < 0:
        sd = -sd
    ll = max(left, int(k - i * s / n + sd))
    rr = min(right, int(k + (n - i) * s / n + sd))
    return min(ll, k), max(rr, k)


def _swap_items(a: Any, i: int, j: int) -> None:
    a[i], a[j] = a[j], a[i]


def _swap_array(a: np.ndarray, i: int, j: int) -> None:
    # Scalar indexing of structured or subarray dtypes returns views, so a
    # tuple swap would write one record into both slots.
    a[[i, j]] = a[[j, i]]


def _take(a: Any, k: int) -> Any:
    """Return ``a[k]`` as a value that later writes to *a* cannot change."""
    if isinstance(a, np.ndarray):
        return a[[k]][0]
    return a[k]


def _floyd_rivest(
    a: Any,
    left: int,
    right: int,
    k: int,
    cmp: Comparator,
    threshold: int,
    stats: SelectionStats,
    depth: int,
) -> None:
    swap = _swap_array if isinstance(a, np.ndarray) else _swap_items
    while right > left:
        if right - left > threshold:
            ll, rr = sample_bounds(left, right, k)
            stats.sample_recursions += 1
            stats.max_depth = max(stats.max_depth, depth + 1)
            _floyd_rivest(a, ll, rr, k, cmp, threshold, stats, depth + 1)

        # Hoare partition of a[left:right + 1] about t. The inner scans have
        # no index checks: a[left] <= t <= a[right] act as sentinels.
        stats.partition_passes += 1
        t = _take(a, k)
        i = left
        j = right
        swap(a, left, k)
        swaps = 1
        if cmp(a[right], t) > 0:
            swap(a, right, left)
            swaps += 1
        while i < j:
            swap(a, i, j)
            swaps += 1
            i += 1
            j -= 1
            while cmp(a[i], t) < 0:
                i += 1
            while cmp(a[j], t) > 0:
                j -= 1
        if cmp(a[left], t) == 0:
            swap(a, left, j)
        else:
            j += 1
            swap(a, j, right)
        stats.swaps += swaps + 1

        # Narrow to the side holding k. Both checks apply when j == k.
        if j <= k:
            left = j + 1
        if k <= j:
            right = j - 1


def nth_element(
    buffer: Any,
    k: int,
    cmp: Comparator | None = None,
    *,
    key: Callable[[Any], Any] | None = None,
    left: int = 0,
    right: int | None = None,
    threshold: int = DEFAULT_SAMPLE_THRESHOLD,
) -> None:
    """Move the k-th smallest element of ``buffer[left:right + 1]`` to index k.

    Afterwards every element of the window before k compares <= ``buffer[k]``
    and every element after k compares >= it. Elements outside the window
    are untouched. Nothing else about the order is guaranteed.

    Example::

        >>> v = [10, 7, 9, 7, 2, 8, 8, 1, 9, 4]
        >>> nth_element(v, 3)
        >>> v[3]
        7

    Args:
        buffer: Mutable sequence or one-dimensional numpy array, modified
            in place.
        k: Zero-based target rank (an absolute index into ``buffer``).
        cmp: Three-way comparator; natural ordering when omitted.
        key: Key function to order by instead of ``cmp``.
        left: First index of the window.
        right: Last index of the window (inclusive); defaults to the end.
        threshold: Window width above which sub-sampling runs.

    Raises:
        InvalidRangeError: If the buffer or window is invalid. The buffer is
            not modified in that case.
        ValueError: If both ``cmp`` and ``key`` are given, or ``threshold``
            is below the supported minimum.

    Any exception raised by the comparator propagates unchanged; the buffer
    is then a permutation of its input in an unspecified order.

    Selecting the same rank again leaves a buffer of distinct values
    unchanged. When the window holds equal values, a repeated call may
    still reorder those equal elements.
    """
    compare = resolve_comparator(cmp, key)
    if threshold < MIN_SAMPLE_THRESHOLD:
        raise ValueError(f"threshold must be >= {MIN_SAMPLE_THRESHOLD}, got {threshold}")
    left, k, right = check_window(buffer, k, left, right)
    _floyd_rivest(buffer, left, right, k, compare, threshold, SelectionStats(), 0)


class FloydRivestSelector:
    """Configured, instrumented front end to :func:`nth_element`.

    Counts comparisons, swaps, partition passes and sub-sample recursions
    for every call and reports them through a :class:`SelectionLogger`.
    Holds no state between calls other than the logger's diagnostic records.
    """

    def __init__(self, config: FloydRivestConfig | None = None) -> None:
        """Initialize the selector.

        Args:
            config: Active configuration. Loaded from the environment when
                omitted.
        """
        self._config = config if config is not None else FloydRivestConfig()
        self._logger = SelectionLogger(self._config)

    @property
    def config(self) -> FloydRivestConfig:
        """The configuration this selector was built with."""
        return self._config

    @property
    def logger(self) -> SelectionLogger:
        """The diagnostic logger receiving one record per call."""
        return self._logger

    def select(
        self,
        buffer: Any,
        k: int,
        cmp: Comparator | None = None,
        *,
        key: Callable[[Any], Any] | None = None,
        left: int = 0,
        right: int | None = None,
    ) -> SelectionResult:
        """Select in place, as :func:`nth_element`, and report the work done.

        Args:
            buffer: Mutable sequence or one-dimensional numpy array.
            k: Zero-based target rank.
            cmp: Three-way comparator; natural ordering when omitted.
            key: Key function to order by instead of ``cmp``.
            left: First index of the window.
            right: Last index of the window (inclusive); defaults to the end.

        Returns:
            SelectionResult with the selected value and work counters.

        Raises:
            InvalidRangeError: If the buffer or window is invalid.
            ValueError: If both ``cmp`` and ``key`` are given.
        """
        compare = resolve_comparator(cmp, key)
        left, k, right = check_window(buffer, k, left, right)
        stats = SelectionStats()

        def counting(x: Any, y: Any) -> int:
            stats.comparisons += 1
            return compare(x, y)

        timestamp_ns = time.time_ns()
        t_start_ns = time.perf_counter_ns()
        _floyd_rivest(buffer, left, right, k, counting, self._config.sample_threshold, stats, 0)
        elapsed_ms = (time.perf_counter_ns() - t_start_ns) / 1_000_000.0

        record = SelectionRecord(
            timestamp_ns=timestamp_ns,
            elapsed_ms=elapsed_ms,
            length=len(buffer),
            window_size=right - left + 1,
            rank=k,
            comparisons=stats.comparisons,
            swaps=stats.swaps,
            partition_passes=stats.partition_passes,
            sample_recursions=stats.sample_recursions,
            max_depth=stats.max_depth,
        )
        self._logger.log_selection(record)

        return SelectionResult(
            rank=k,
            value=_take(buffer, k),
            diagnostics={
                "comparisons": stats.comparisons,
                "swaps": stats.swaps,
                "partition_passes": stats.partition_passes,
                "sample_recursions": stats.sample_recursions,
                "max_depth": stats.max_depth,
                "elapsed_ms": elapsed_ms,
            },
        )
