"""Order-statistics helpers built on in-place selection.

Quantiles with numpy-compatible interpolation methods, medians,
percentiles and top-k extraction, none of which sort the full input.
"""

from floydrivest.order_stats.base import QuantileMethod
from floydrivest.order_stats.methods import (
    HigherMethod,
    LinearMethod,
    LowerMethod,
    MidpointMethod,
    NearestMethod,
)
from floydrivest.order_stats.quantile import median, percentile, quantile
from floydrivest.order_stats.registry import QuantileMethodRegistry
from floydrivest.order_stats.topk import nlargest, nsmallest

__all__ = [
    "HigherMethod",
    "LinearMethod",
    "LowerMethod",
    "MidpointMethod",
    "NearestMethod",
    "QuantileMethod",
    "QuantileMethodRegistry",
    "median",
    "nlargest",
    "nsmallest",
    "percentile",
    "quantile",
]
