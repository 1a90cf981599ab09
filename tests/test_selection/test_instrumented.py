"""Tests for FloydRivestSelector and its result types."""

from __future__ import annotations

import logging

import numpy as np
import pytest

from floydrivest.config import FloydRivestConfig
from floydrivest.exceptions import InvalidRangeError
from floydrivest.selection.selector import FloydRivestSelector
from floydrivest.selection.types import SelectionResult, SelectionStats


class TestFloydRivestSelector:
    """Tests for the configured, instrumented selector."""

    def test_selects_like_nth_element(
        self, silent_config: FloydRivestConfig, small_unsorted: list[int]
    ) -> None:
        """The value and the buffer layout follow the nth_element contract."""
        selector = FloydRivestSelector(silent_config)
        result = selector.select(small_unsorted, 3)
        assert result.rank == 3
        assert result.value == 7
        assert small_unsorted[3] == 7

    def test_counts_work(
        self, silent_config: FloydRivestConfig, small_permutation: list[int]
    ) -> None:
        """A small selection does comparisons and swaps but no sampling."""
        result = FloydRivestSelector(silent_config).select(small_permutation, 5)
        assert result.diagnostics["comparisons"] > 0
        assert result.diagnostics["swaps"] > 0
        assert result.diagnostics["partition_passes"] >= 1
        assert result.diagnostics["sample_recursions"] == 0
        assert result.diagnostics["max_depth"] == 0

    def test_large_input_samples(
        self, silent_config: FloydRivestConfig, rng: np.random.Generator
    ) -> None:
        """Windows wider than the threshold recurse on a sample first."""
        data = [int(x) for x in rng.permutation(5000)]
        result = FloydRivestSelector(silent_config).select(data, 2500)
        assert result.value == 2500
        assert result.diagnostics["sample_recursions"] >= 1
        assert result.diagnostics["max_depth"] >= 1

    def test_single_element_does_no_work(self, silent_config: FloydRivestConfig) -> None:
        """The loop body never runs for a one-element window."""
        result = FloydRivestSelector(silent_config).select([7], 0)
        assert result.value == 7
        assert result.diagnostics["comparisons"] == 0
        assert result.diagnostics["partition_passes"] == 0

    def test_threshold_from_config(self, rng: np.random.Generator) -> None:
        """A wider threshold than the window disables sampling."""
        config = FloydRivestConfig(
            _env_file=None,
            sample_threshold=10_000,  # type: ignore[call-arg]
        )
        data = [int(x) for x in rng.permutation(3000)]
        result = FloydRivestSelector(config).select(data, 1000)
        assert result.value == 1000
        assert result.diagnostics["sample_recursions"] == 0

    def test_key_and_window(self, silent_config: FloydRivestConfig) -> None:
        """Keyword arguments are forwarded."""
        v = ["zz", "dddd", "a", "ccc", "bb", "y"]
        result = FloydRivestSelector(silent_config).select(v, 3, key=len, left=1, right=4)
        assert result.value == "ccc"
        assert v[0] == "zz"
        assert v[5] == "y"

    def test_invalid_range(self, silent_config: FloydRivestConfig) -> None:
        """Contract violations raise before any record is logged."""
        selector = FloydRivestSelector(silent_config)
        with pytest.raises(InvalidRangeError):
            selector.select([1, 2, 3], 3)
        assert selector.logger.get_diagnostic_data() == []

    def test_records_each_call(
        self, silent_config: FloydRivestConfig, small_permutation: list[int]
    ) -> None:
        """Diagnostic mode keeps one record per selection."""
        selector = FloydRivestSelector(silent_config)
        selector.select(list(small_permutation), 1)
        selector.select(list(small_permutation), 8)
        records = selector.logger.get_diagnostic_data()
        assert [r.rank for r in records] == [1, 8]
        assert all(r.length == 10 and r.window_size == 10 for r in records)

    def test_summary_log_line(
        self,
        small_permutation: list[int],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """log_level='summary' emits one line per call on the floydrivest logger."""
        config = FloydRivestConfig(
            _env_file=None,
            log_level="summary",  # type: ignore[call-arg]
        )
        with caplog.at_level(logging.DEBUG, logger="floydrivest"):
            FloydRivestSelector(config).select(small_permutation, 4)
        assert len(caplog.records) == 1
        assert "rank=4" in caplog.records[0].message
        assert "window=10/10" in caplog.records[0].message

    def test_default_config_loaded(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without a config the environment is read."""
        monkeypatch.setenv("FR_SAMPLE_THRESHOLD", "800")
        selector = FloydRivestSelector()
        assert selector.config.sample_threshold == 800


class TestResultTypes:
    """Tests for SelectionResult and SelectionStats."""

    def test_result_frozen(self) -> None:
        """SelectionResult should reject attribute mutation."""
        result = SelectionResult(rank=1, value=2, diagnostics={})
        with pytest.raises(AttributeError):
            result.rank = 3  # type: ignore[misc]

    def test_result_slots(self) -> None:
        """SelectionResult should use __slots__."""
        assert hasattr(SelectionResult(rank=0, value=0, diagnostics={}), "__slots__")

    def test_stats_start_at_zero(self) -> None:
        """Counters are zero until a selection runs."""
        stats = SelectionStats()
        assert stats.comparisons == 0
        assert stats.swaps == 0
        assert stats.partition_passes == 0
        assert stats.sample_recursions == 0
        assert stats.max_depth == 0
