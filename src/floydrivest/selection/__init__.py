"""Selection subsystem for floydrivest.

In-place k-th smallest selection via Floyd-Rivest sub-sampling and a
sentinel Hoare partition, plus comparator helpers.
"""

from floydrivest.selection.ordering import (
    comparator_from_key,
    natural_order,
    resolve_comparator,
    reverse_order,
)
from floydrivest.selection.selector import (
    FloydRivestSelector,
    check_window,
    nth_element,
    sample_bounds,
)
from floydrivest.selection.types import SelectionResult, SelectionStats

__all__ = [
    "FloydRivestSelector",
    "SelectionResult",
    "SelectionStats",
    "check_window",
    "comparator_from_key",
    "natural_order",
    "nth_element",
    "resolve_comparator",
    "reverse_order",
    "sample_bounds",
]
