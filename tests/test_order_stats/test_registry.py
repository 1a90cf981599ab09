"""Tests for QuantileMethodRegistry and the built-in methods."""

from __future__ import annotations

import pytest

from floydrivest.config import FloydRivestConfig
from floydrivest.order_stats.base import QuantileMethod
from floydrivest.order_stats.methods import (
    HigherMethod,
    LinearMethod,
    LowerMethod,
    MidpointMethod,
    NearestMethod,
)
from floydrivest.order_stats.registry import QuantileMethodRegistry


class TestRegistry:
    """Registration and lookup."""

    def test_builtins_registered(self) -> None:
        assert QuantileMethodRegistry.list_registered() == [
            "higher",
            "linear",
            "lower",
            "midpoint",
            "nearest",
        ]

    def test_get(self) -> None:
        assert QuantileMethodRegistry.get("linear") is LinearMethod

    def test_get_unknown(self) -> None:
        with pytest.raises(KeyError, match="Available: higher, linear"):
            QuantileMethodRegistry.get("weibull")

    def test_duplicate_registration(self) -> None:
        with pytest.raises(ValueError, match="already registered"):

            @QuantileMethodRegistry.register("linear")
            class Another(LinearMethod):
                pass

    def test_build_from_config(self) -> None:
        config = FloydRivestConfig(_env_file=None, quantile_method="midpoint")  # type: ignore[call-arg]
        assert isinstance(QuantileMethodRegistry.build(config), MidpointMethod)

    def test_abstract_base(self) -> None:
        with pytest.raises(TypeError):
            QuantileMethod()  # type: ignore[abstract]


class TestMethods:
    """Rank choice and interpolation of each method."""

    @pytest.mark.parametrize(
        ("method", "h", "expected"),
        [
            (LinearMethod(), 2.25, (2, 3)),
            (LinearMethod(), 4.0, (4, 4)),
            (LowerMethod(), 2.75, (2, 2)),
            (HigherMethod(), 2.25, (3, 3)),
            (NearestMethod(), 2.5, (2, 2)),
            (NearestMethod(), 3.5, (4, 4)),
            (MidpointMethod(), 1.1, (1, 2)),
        ],
    )
    def test_ranks(self, method: QuantileMethod, h: float, expected: tuple[int, int]) -> None:
        assert method.ranks(h) == expected

    def test_linear_interpolate(self) -> None:
        method = LinearMethod()
        assert method.interpolate(10, 20, 2.25) == pytest.approx(12.5)
        assert method.interpolate(10, 20, 2.75) == pytest.approx(17.5)
        assert method.interpolate(10, 10, 3.0) == 10

    def test_midpoint_interpolate(self) -> None:
        method = MidpointMethod()
        assert method.interpolate(10, 20, 0.3) == 15
        assert method.interpolate(10, 10, 2.0) == 10
