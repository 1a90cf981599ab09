"""Base class for quantile interpolation methods.

A quantile q of n values sits at the virtual index ``h = (n - 1) * q`` of
the sorted data. A method decides which one or two order statistics around
h to select and how to combine them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class QuantileMethod(ABC):
    """Abstract base class for quantile interpolation methods."""

    @abstractmethod
    def ranks(self, h: float) -> tuple[int, int]:
        """Return the (low, high) ranks to select for virtual index *h*.

        ``high`` is either ``low`` or ``low + 1``.
        """

    @abstractmethod
    def interpolate(self, low: Any, high: Any, h: float) -> Any:
        """Combine the selected order statistics into the quantile value.

        Args:
            low: Element at the low rank.
            high: Element at the high rank.
            h: Virtual index the quantile falls on.
        """
