"""Comparator helpers.

A comparator is a callable ``cmp(x, y) -> int`` returning a negative number
when ``x`` orders before ``y``, zero when they are equivalent and a positive
number otherwise -- the protocol ``functools.cmp_to_key`` understands.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    Comparator = Callable[[Any, Any], int]


def natural_order(x: Any, y: Any) -> int:
    """Compare two elements by their intrinsic ``<`` ordering.

    Only ``<`` is used, so numpy scalars (whose booleans do not subtract)
    and any type implementing ``__lt__`` work. Unordered values such as NaN
    compare equal to everything.
    """
    if x < y:
        return -1
    if y < x:
        return 1
    return 0


def reverse_order(x: Any, y: Any) -> int:
    """Natural ordering, descending."""
    return natural_order(y, x)


def comparator_from_key(key: Callable[[Any], Any]) -> Comparator:
    """Build a comparator that orders elements by ``key(element)``.

    The key is recomputed on every comparison; cache it in the elements
    themselves when it is expensive.
    """

    def compare(x: Any, y: Any) -> int:
        return natural_order(key(x), key(y))

    return compare


def resolve_comparator(
    cmp: Comparator | None = None,
    key: Callable[[Any], Any] | None = None,
) -> Comparator:
    """Pick the comparator for a selection call.

    Args:
        cmp: Explicit three-way comparator, if any.
        key: Key function, if any.

    Returns:
        *cmp* if given, a key-derived comparator if *key* is given,
        otherwise :func:`natural_order`.

    Raises:
        ValueError: If both *cmp* and *key* are supplied.
    """
    if cmp is not None and key is not None:
        raise ValueError("Pass either cmp or key, not both")
    if cmp is not None:
        return cmp
    if key is not None:
        return comparator_from_key(key)
    return natural_order
