"""Quantiles, percentiles and medians by selection.

Each call performs at most two selections instead of a full sort: the low
rank over the whole buffer, then the high rank over the part right of it,
which after the first selection holds only elements >= the low one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np

from floydrivest.config import FloydRivestConfig
from floydrivest.exceptions import InvalidRangeError
from floydrivest.order_stats.registry import QuantileMethodRegistry
from floydrivest.selection.selector import nth_element

if TYPE_CHECKING:
    from collections.abc import Iterable


def quantile(
    data: Iterable[Any],
    q: float,
    *,
    method: str | None = None,
    overwrite_input: bool = False,
    config: FloydRivestConfig | None = None,
) -> Any:
    """Compute the q-th quantile of *data*.

    Args:
        data: Numeric values. Copied (numpy arrays keep their dtype) unless
            *overwrite_input*.
        q: Quantile in [0, 1].
        method: Interpolation method name; ``None`` uses the configured
            default (``FloydRivestConfig.quantile_method``).
        overwrite_input: Select directly in *data*, which must then be a
            mutable sequence or one-dimensional numpy array. Its order is
            changed.
        config: Configuration supplying the default method and sample
            threshold. Loaded from the environment when omitted.

    Returns:
        The quantile value.

    Raises:
        InvalidRangeError: If *data* is empty or *q* is outside [0, 1].
        KeyError: If *method* is not a registered quantile method.
    """
    if not 0.0 <= q <= 1.0:
        raise InvalidRangeError(f"Quantile must be in [0, 1], got {q}")

    config = config if config is not None else FloydRivestConfig()
    if method is not None:
        strategy = QuantileMethodRegistry.get(method)()
    else:
        strategy = QuantileMethodRegistry.build(config)

    if overwrite_input:
        buffer = data
    elif isinstance(data, np.ndarray):
        buffer = data.copy()
    else:
        buffer = list(data)
    n = len(buffer)  # type: ignore[arg-type]
    if n == 0:
        raise InvalidRangeError("Cannot compute a quantile of an empty buffer")

    h = (n - 1) * q
    lo, hi = strategy.ranks(h)
    threshold = config.sample_threshold
    nth_element(buffer, lo, threshold=threshold)
    low = buffer[lo]  # type: ignore[index]
    if hi == lo:
        high = low
    else:
        nth_element(buffer, hi, left=lo + 1, threshold=threshold)
        high = buffer[hi]  # type: ignore[index]
    return strategy.interpolate(low, high, h)


def percentile(
    data: Iterable[Any],
    p: float,
    *,
    method: str | None = None,
    overwrite_input: bool = False,
    config: FloydRivestConfig | None = None,
) -> Any:
    """Compute the p-th percentile of *data*, p in [0, 100].

    See :func:`quantile` for the arguments.
    """
    if not 0.0 <= p <= 100.0:
        raise InvalidRangeError(f"Percentile must be in [0, 100], got {p}")
    return quantile(
        data, p / 100.0, method=method, overwrite_input=overwrite_input, config=config
    )


def median(
    data: Iterable[Any],
    *,
    overwrite_input: bool = False,
    config: FloydRivestConfig | None = None,
) -> Any:
    """Median of *data*; the mean of the two middle values for even lengths."""
    return quantile(data, 0.5, method="linear", overwrite_input=overwrite_input, config=config)
