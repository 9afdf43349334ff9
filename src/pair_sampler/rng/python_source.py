"""Random sources backed by the standard library ``random`` module.

``PythonRandomSource`` wraps a (seedable) ``random.Random``.
``SystemRandomSource`` wraps ``random.SystemRandom``, which reads from
``os.urandom()``: cryptographically secure but never reproducible.
"""

from __future__ import annotations

import logging
import random as _random
from collections.abc import Sequence
from typing import TYPE_CHECKING

from pair_sampler.rng.base import RandomSource, _check_weights
from pair_sampler.rng.registry import register_random_source

if TYPE_CHECKING:
    from pair_sampler.config import PairSamplerConfig

logger = logging.getLogger("pair_sampler")


@register_random_source("python")
class PythonRandomSource(RandomSource):
    """``random.Random`` wrapper.

    Args:
        seed: Optional seed. Ignored when *generator* is given.
        generator: An existing ``random.Random`` instance to draw from.
    """

    def __init__(
        self,
        seed: int | None = None,
        generator: _random.Random | None = None,
    ) -> None:
        self._rng = generator if generator is not None else _random.Random(seed)

    @classmethod
    def from_config(cls, config: PairSamplerConfig) -> PythonRandomSource:
        return cls(seed=config.seed)

    @property
    def name(self) -> str:
        """Return ``'python'``."""
        return "python"

    def randrange(self, low: int, high: int) -> int:
        return self._rng.randrange(low, high)

    def random(self) -> float:
        return self._rng.random()

    def sample_indices(self, n: int, k: int) -> list[int]:
        return self._rng.sample(range(n), k)

    def choose_weighted(self, weights: Sequence[float]) -> int:
        w = _check_weights(weights)
        return self._rng.choices(range(len(w)), weights=w.tolist())[0]


@register_random_source("system")
class SystemRandomSource(PythonRandomSource):
    """``random.SystemRandom`` wrapper. Always available, never seedable."""

    def __init__(self) -> None:
        super().__init__(generator=_random.SystemRandom())

    @classmethod
    def from_config(cls, config: PairSamplerConfig) -> SystemRandomSource:
        if config.seed is not None:
            logger.warning("Random source 'system' cannot be seeded; ignoring seed=%r", config.seed)
        return cls()

    @property
    def name(self) -> str:
        """Return ``'system'``."""
        return "system"
