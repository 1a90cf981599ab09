"""Built-in quantile interpolation methods.

Definitions follow numpy's ``percentile`` methods of the same names.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from floydrivest.order_stats.base import QuantileMethod
from floydrivest.order_stats.registry import QuantileMethodRegistry


def _bracket(h: float) -> tuple[int, int]:
    return math.floor(h), math.ceil(h)


def _widen(value: Any) -> Any:
    # numpy integer scalars wrap around on overflow.
    if isinstance(value, np.integer):
        return float(value)
    return value


@QuantileMethodRegistry.register("linear")
class LinearMethod(QuantileMethod):
    """``low + (high - low) * frac(h)``."""

    def ranks(self, h: float) -> tuple[int, int]:
        return _bracket(h)

    def interpolate(self, low: Any, high: Any, h: float) -> Any:
        low, high = _widen(low), _widen(high)
        t = h - math.floor(h)
        if t == 0:
            return low
        diff = high - low
        # Interpolate from the nearer end, as numpy does, so t close to 1
        # reproduces high exactly.
        if t >= 0.5:
            return high - diff * (1 - t)
        return low + diff * t


@QuantileMethodRegistry.register("lower")
class LowerMethod(QuantileMethod):
    """Element at ``floor(h)``."""

    def ranks(self, h: float) -> tuple[int, int]:
        r = math.floor(h)
        return r, r

    def interpolate(self, low: Any, high: Any, h: float) -> Any:
        return low


@QuantileMethodRegistry.register("higher")
class HigherMethod(QuantileMethod):
    """Element at ``ceil(h)``."""

    def ranks(self, h: float) -> tuple[int, int]:
        r = math.ceil(h)
        return r, r

    def interpolate(self, low: Any, high: Any, h: float) -> Any:
        return high


@QuantileMethodRegistry.register("nearest")
class NearestMethod(QuantileMethod):
    """Element at ``round(h)``, ties to even."""

    def ranks(self, h: float) -> tuple[int, int]:
        r = round(h)
        return r, r

    def interpolate(self, low: Any, high: Any, h: float) -> Any:
        return low


@QuantileMethodRegistry.register("midpoint")
class MidpointMethod(QuantileMethod):
    """Mean of the elements at ``floor(h)`` and ``ceil(h)``."""

    def ranks(self, h: float) -> tuple[int, int]:
        return _bracket(h)

    def interpolate(self, low: Any, high: Any, h: float) -> Any:
        if h == math.floor(h):
            return low
        return (_widen(low) + _widen(high)) / 2
