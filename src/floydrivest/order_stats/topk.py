"""Top-k extraction by selection."""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any

from floydrivest.exceptions import InvalidRangeError
from floydrivest.selection.ordering import resolve_comparator
from floydrivest.selection.selector import nth_element

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from floydrivest.selection.ordering import Comparator


def nsmallest(
    n: int,
    data: Iterable[Any],
    cmp: Comparator | None = None,
    *,
    key: Callable[[Any], Any] | None = None,
) -> list[Any]:
    """Return the *n* smallest elements of *data*, sorted ascending.

    Selects rank ``n - 1`` in a copy of *data*, then sorts only the
    ``n`` elements left of it.

    Raises:
        InvalidRangeError: If *n* is outside ``[0, len(data)]``.
        ValueError: If both *cmp* and *key* are given.
    """
    compare = resolve_comparator(cmp, key)
    buffer = list(data)
    if not 0 <= n <= len(buffer):
        raise InvalidRangeError(f"n must be in [0, {len(buffer)}], got {n}")
    if n == 0:
        return []
    nth_element(buffer, n - 1, compare)
    return sorted(buffer[:n], key=functools.cmp_to_key(compare))


def nlargest(
    n: int,
    data: Iterable[Any],
    cmp: Comparator | None = None,
    *,
    key: Callable[[Any], Any] | None = None,
) -> list[Any]:
    """Return the *n* largest elements of *data*, sorted descending.

    Raises:
        InvalidRangeError: If *n* is outside ``[0, len(data)]``.
        ValueError: If both *cmp* and *key* are given.
    """
    compare = resolve_comparator(cmp, key)

    def descending(x: Any, y: Any) -> int:
        return compare(y, x)

    return nsmallest(n, data, descending)
