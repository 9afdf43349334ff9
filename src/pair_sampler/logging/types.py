"""Data types for the diagnostic logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PairSamplingRecord:
    """Immutable record of a single pair sampling call.

    Attributes:
        timestamp_ns: ``perf_counter_ns()`` reading when the call started.
        elapsed_us: Time spent inside the sampler (microseconds).
        strategy: Name of the sampling strategy used.
        random_source: Name of the random source drawn from.
        length: Domain size.
        deny_low: Smaller forbidden index.
        deny_high: Larger forbidden index.
        low: Smaller returned index.
        high: Larger returned index.
        draws: Pair draws consumed (above 1 only after rejections).
        config_hash: 16-char SHA-256 prefix of the active config.
    """

    # Timing
    timestamp_ns: int
    elapsed_us: float

    # Components
    strategy: str
    random_source: str

    # Inputs
    length: int
    deny_low: int
    deny_high: int

    # Output
    low: int
    high: int
    draws: int

    # Config snapshot
    config_hash: str
