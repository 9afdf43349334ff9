"""Configured pair sampling engine.

Wires the configuration, the random source, the sampling strategy and the
diagnostic logger together for repeated sampling, e.g. in Monte Carlo
inner loops::

    engine = PairSamplingEngine(PairSamplerConfig(seed=1, strategy="fast"))
    low, high = engine.draw(10, (3, 4))
"""

from __future__ import annotations

import hashlib
import logging
import time
from typing import TYPE_CHECKING, Any

from pair_sampler.config import PairSamplerConfig, resolve_config
from pair_sampler.logging.logger import SamplingLogger
from pair_sampler.logging.types import PairSamplingRecord
from pair_sampler.rng.registry import RandomSourceRegistry
from pair_sampler.sampling.registry import PairSamplerRegistry

if TYPE_CHECKING:
    from pair_sampler.rng.base import RandomSource
    from pair_sampler.sampling.base import PairSampler
    from pair_sampler.sampling.types import PairResult

logger = logging.getLogger("pair_sampler")


def _config_hash(config: PairSamplerConfig) -> str:
    """Return the first 16 hex characters of the SHA-256 of the config dump."""
    raw = config.model_dump_json().encode("utf-8")
    return hashlib.sha256(raw).hexdigest()[:16]


class PairSamplingEngine:
    """Draws pairs with a configured strategy and random source.

    Not thread-safe: the engine owns one random source, and sources must
    not be shared across threads without external locking.

    Args:
        config: Configuration; loaded from the environment when ``None``.
        random_source: Source to draw from. When ``None`` the source named
            by ``config.random_source_type`` is built from the registry.
    """

    def __init__(
        self,
        config: PairSamplerConfig | None = None,
        random_source: RandomSource | None = None,
    ) -> None:
        self._config = config if config is not None else PairSamplerConfig()
        self._source = (
            random_source if random_source is not None else RandomSourceRegistry.build(self._config)
        )
        self._sampler = PairSamplerRegistry.build(self._config)
        self._config_hash = _config_hash(self._config)
        self._logger = SamplingLogger(self._config)

        logger.info(
            "PairSamplingEngine initialized: strategy=%s, random_source=%s",
            self._sampler.name,
            self._source.name,
        )

    def draw(
        self,
        length: int,
        deny: tuple[int, int],
        overrides: dict[str, Any] | None = None,
    ) -> PairResult:
        """Draw one pair other than *deny* from ``range(length)``.

        Args:
            length: Number of indexable positions (at least 3).
            deny: The forbidden pair.
            overrides: Per-call ``pair_*`` config overrides, e.g.
                ``{"pair_strategy": "fast"}``.

        Returns:
            PairResult with ``low < high``.

        Raises:
            PreconditionViolation: On invalid *length* or *deny*.
            ConfigValidationError: On invalid override keys.
        """
        config = resolve_config(self._config, overrides)
        if config is self._config:
            sampler = self._sampler
            hash_str = self._config_hash
        else:
            sampler = self._sampler_for(config)
            hash_str = _config_hash(config)

        t_start_ns = time.perf_counter_ns()
        result = sampler.sample(length, deny, self._source)
        elapsed_us = (time.perf_counter_ns() - t_start_ns) / 1_000.0

        deny_low, deny_high = sorted(deny)
        record = PairSamplingRecord(
            timestamp_ns=t_start_ns,
            elapsed_us=elapsed_us,
            strategy=sampler.name,
            random_source=self._source.name,
            length=int(length),
            deny_low=int(deny_low),
            deny_high=int(deny_high),
            low=result.low,
            high=result.high,
            draws=result.draws,
            config_hash=hash_str,
        )
        self._logger.log_pair(record, config)
        return result

    def draw_many(self, length: int, deny: tuple[int, int], count: int) -> list[PairResult]:
        """Draw *count* independent pairs with the default strategy."""
        return [self.draw(length, deny) for _ in range(count)]

    def _sampler_for(self, config: PairSamplerConfig) -> PairSampler:
        if config.strategy == self._sampler.name:
            return self._sampler
        return PairSamplerRegistry.build(config)

    @property
    def random_source(self) -> RandomSource:
        """The random source this engine draws from."""
        return self._source

    @property
    def sampler(self) -> PairSampler:
        """The default sampling strategy."""
        return self._sampler

    @property
    def default_config(self) -> PairSamplerConfig:
        """The configuration this engine was built with."""
        return self._config

    @property
    def sampling_logger(self) -> SamplingLogger:
        """The diagnostic logger for this engine."""
        return self._logger

    def close(self) -> None:
        """Release the random source."""
        self._source.close()
