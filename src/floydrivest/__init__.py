"""floydrivest: in-place k-th smallest selection.

Floyd-Rivest selection with a sentinel Hoare partition. Moves the k-th
smallest element of a mutable sequence into position k and partitions the
sequence around it in expected linear time, without a full sort.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("floydrivest")
except PackageNotFoundError:
    __version__ = "0.0.0"

from floydrivest.config import FloydRivestConfig, resolve_config, validate_overrides
from floydrivest.exceptions import (
    ConfigValidationError,
    FloydRivestError,
    InvalidRangeError,
)
from floydrivest.order_stats import median, nlargest, nsmallest, percentile, quantile
from floydrivest.selection import FloydRivestSelector, SelectionResult, nth_element

__all__ = [
    "ConfigValidationError",
    "FloydRivestConfig",
    "FloydRivestError",
    "FloydRivestSelector",
    "InvalidRangeError",
    "SelectionResult",
    "__version__",
    "median",
    "nlargest",
    "nsmallest",
    "nth_element",
    "percentile",
    "quantile",
    "resolve_config",
    "validate_overrides",
]
