"""Shared pytest fixtures for floydrivest tests.

Provides reusable configuration objects and reproducible input buffers
that are used across multiple test modules.
"""

from __future__ import annotations

import numpy as np
import pytest

from floydrivest.config import FloydRivestConfig


@pytest.fixture
def default_config() -> FloydRivestConfig:
    """Return a FloydRivestConfig with all default values, ignoring .env."""
    return FloydRivestConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def diagnostic_config() -> FloydRivestConfig:
    """Return a config with diagnostic mode and full logging enabled."""
    return FloydRivestConfig(
        _env_file=None,
        log_level="full",
        diagnostic_mode=True,  # type: ignore[call-arg]
    )


@pytest.fixture
def silent_config() -> FloydRivestConfig:
    """Return a config with no logging but records kept in memory."""
    return FloydRivestConfig(
        _env_file=None,
        log_level="none",
        diagnostic_mode=True,  # type: ignore[call-arg]
    )


@pytest.fixture
def rng() -> np.random.Generator:
    """Return a seeded generator so every run sees the same inputs."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def small_unsorted() -> list[int]:
    """Return a ten-element buffer containing duplicates."""
    return [10, 7, 9, 7, 2, 8, 8, 1, 9, 4]


@pytest.fixture
def small_permutation() -> list[int]:
    """Return a fixed permutation of 0..9."""
    return [9, 5, 0, 6, 8, 2, 3, 7, 1, 4]


@pytest.fixture
def large_permutation(rng: np.random.Generator) -> list[int]:
    """Return a random permutation of 0..1200.

    The full window is wider than the default sample threshold, so
    selecting in it exercises the sub-sampling branch.
    """
    return [int(x) for x in rng.permutation(1201)]
