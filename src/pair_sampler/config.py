"""Configuration system for pair-sampler.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (PAIR_*) -> .env file -> field defaults.

Per-call overrides are applied via resolve_config() which creates a new
config instance without mutating the defaults. Infrastructure fields are
protected from per-call override.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pair_sampler.exceptions import ConfigValidationError

_OVERRIDE_PREFIX = "pair_"

# Fields that can be overridden per call. The random source, its seed and
# the benchmark parameters are fixed for the lifetime of an engine.
_PER_CALL_FIELDS: frozenset[str] = frozenset(
    {
        "strategy",
        "log_level",
        "diagnostic_mode",
    }
)

_ALL_FIELDS: frozenset[str] = frozenset()


class PairSamplerConfig(BaseSettings):
    """Configuration for pair-sampler.

    Resolution order: init kwargs -> env vars (PAIR_*) -> .env file -> defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="PAIR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Infrastructure (NOT per-call overridable) ---

    random_source_type: str = Field(
        default="numpy",
        description="Registered random source: 'numpy', 'python', 'system'",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for seedable random sources (None = fresh entropy)",
    )

    # --- Benchmark (NOT per-call overridable) ---

    bench_length: int = Field(default=5, ge=3, description="Domain size for the benchmark")
    bench_deny_a: int = Field(default=0, ge=0, description="First forbidden index for the benchmark")
    bench_deny_b: int = Field(default=2, ge=0, description="Second forbidden index for the benchmark")
    bench_iterations: int = Field(default=100_000, gt=0, description="Timed calls per strategy")
    bench_warmup: int = Field(default=1_000, ge=0, description="Untimed calls before timing")

    # --- Sampling (per-call overridable) ---

    strategy: str = Field(
        default="uniform",
        description="Pair sampling strategy: 'uniform' (exact) or 'fast' (biased)",
    )

    # --- Logging (per-call overridable) ---

    log_level: Literal["none", "summary", "full"] = Field(
        default="none",
        description="Per-pair logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all sampling records in memory for analysis",
    )


_ALL_FIELDS = frozenset(PairSamplerConfig.model_fields.keys())


def _strip_prefix(key: str) -> str:
    if key.startswith(_OVERRIDE_PREFIX):
        return key[len(_OVERRIDE_PREFIX) :]
    return key


def validate_overrides(overrides: dict[str, Any]) -> None:
    """Validate all ``pair_*`` keys in *overrides* without creating a config.

    Args:
        overrides: Per-call overrides, potentially with ``pair_`` prefix.

    Raises:
        ConfigValidationError: If any ``pair_*`` key is unknown or
            non-overridable.
    """
    for key in overrides:
        if not key.startswith(_OVERRIDE_PREFIX):
            continue
        field_name = _strip_prefix(key)
        if field_name not in _ALL_FIELDS:
            raise ConfigValidationError(
                f"Unknown config field: '{key}' (no field '{field_name}' exists)"
            )
        if field_name not in _PER_CALL_FIELDS:
            raise ConfigValidationError(
                f"Field '{field_name}' is an infrastructure field and cannot be "
                f"overridden per call"
            )


def resolve_config(
    defaults: PairSamplerConfig,
    overrides: dict[str, Any] | None,
) -> PairSamplerConfig:
    """Create a new config instance merging defaults with per-call overrides.

    Override keys use the ``pair_`` prefix (e.g., ``'pair_strategy': 'fast'``).
    Keys without the prefix are silently ignored.

    Args:
        defaults: The base configuration.
        overrides: Per-call overrides.

    Returns:
        *defaults* itself when nothing applies, else a new validated config.

    Raises:
        ConfigValidationError: If any ``pair_*`` key is unknown or
            non-overridable.
    """
    if not overrides:
        return defaults

    validate_overrides(overrides)

    updates = {
        _strip_prefix(key): value
        for key, value in overrides.items()
        if key.startswith(_OVERRIDE_PREFIX)
    }
    if not updates:
        return defaults

    # model_copy(update=...) skips validation; model_validate coerces types.
    merged = defaults.model_dump()
    merged.update(updates)
    return PairSamplerConfig.model_validate(merged)
