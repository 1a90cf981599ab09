"""Configuration system for floydrivest.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (FR_*) -> .env file -> field defaults.

Per-call overrides are applied via resolve_config() which creates a new
config instance without mutating the defaults.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from floydrivest.exceptions import ConfigValidationError

# Window width above which the sub-sampling step runs. Below it a plain
# partition pass is cheaper than the sampling overhead.
DEFAULT_SAMPLE_THRESHOLD = 600

# Sub-sampling must always recurse on a strictly smaller window.
MIN_SAMPLE_THRESHOLD = 100

# All known config field names (populated after class definition).
_ALL_FIELDS: frozenset[str] = frozenset()


class FloydRivestConfig(BaseSettings):
    """Configuration for floydrivest.

    Resolution order: init kwargs -> env vars (FR_*) -> .env file -> defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="FR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Selection ---

    sample_threshold: int = Field(
        default=DEFAULT_SAMPLE_THRESHOLD,
        ge=MIN_SAMPLE_THRESHOLD,
        description="Window width (right - left) above which sub-sampling runs",
    )

    # --- Order statistics ---

    quantile_method: str = Field(
        default="linear",
        description="Default quantile interpolation: 'linear', 'lower', 'higher', "
        "'nearest', 'midpoint'",
    )

    # --- Logging ---

    log_level: Literal["none", "summary", "full"] = Field(
        default="none",
        description="Logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all selection records in memory for analysis",
    )


# Populate _ALL_FIELDS now that the class is defined.
_ALL_FIELDS = frozenset(FloydRivestConfig.model_fields.keys())


def validate_overrides(overrides: dict[str, Any]) -> None:
    """Check that every key in *overrides* names a config field.

    Args:
        overrides: Mapping of field name to override value.

    Raises:
        ConfigValidationError: If any key is not a known config field.
    """
    for key in overrides:
        if key not in _ALL_FIELDS:
            available = ", ".join(sorted(_ALL_FIELDS))
            raise ConfigValidationError(
                f"Unknown config field: '{key}'. Available: {available}"
            )


def resolve_config(
    defaults: FloydRivestConfig,
    overrides: dict[str, Any] | None,
) -> FloydRivestConfig:
    """Create a new config instance merging defaults with per-call overrides.

    Args:
        defaults: The base configuration loaded from environment.
        overrides: Field overrides for a single call, keyed by field name.

    Returns:
        A new FloydRivestConfig with overrides applied, or *defaults* itself
        when there is nothing to override.

    Raises:
        ConfigValidationError: If a key is unknown or a value fails validation.
    """
    if not overrides:
        return defaults

    validate_overrides(overrides)

    # model_copy(update=...) skips validation, so string "700" would not
    # be coerced to int 700. model_validate runs the full validator.
    merged = defaults.model_dump()
    merged.update(overrides)
    try:
        return FloydRivestConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigValidationError(f"Invalid config override: {exc}") from exc
