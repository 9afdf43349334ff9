"""Seedable random source backed by ``numpy.random.Generator``.

This is the default source. ``numpy.random.default_rng`` uses the PCG64
bit generator, so a fixed seed gives a reproducible stream of pairs.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np

from pair_sampler.rng.base import RandomSource, _check_weights
from pair_sampler.rng.registry import register_random_source

if TYPE_CHECKING:
    from pair_sampler.config import PairSamplerConfig


@register_random_source("numpy")
class NumpyRandomSource(RandomSource):
    """``numpy.random.Generator`` wrapper.

    Args:
        seed: Optional seed for reproducible output. Ignored when
            *generator* is given.
        generator: An existing generator to draw from. The caller keeps
            sharing it; draws advance its state.
    """

    def __init__(
        self,
        seed: int | None = None,
        generator: np.random.Generator | None = None,
    ) -> None:
        self._seed = seed
        self._rng = generator if generator is not None else np.random.default_rng(seed)

    @classmethod
    def from_config(cls, config: PairSamplerConfig) -> NumpyRandomSource:
        """Build a generator seeded from ``config.seed``."""
        return cls(seed=config.seed)

    @property
    def name(self) -> str:
        """Return ``'numpy'``."""
        return "numpy"

    @property
    def generator(self) -> np.random.Generator:
        """The underlying numpy generator."""
        return self._rng

    def randrange(self, low: int, high: int) -> int:
        if low >= high:
            raise ValueError(f"empty range for randrange({low}, {high})")
        return int(self._rng.integers(low, high))

    def random(self) -> float:
        return float(self._rng.random())

    def sample_indices(self, n: int, k: int) -> list[int]:
        """Draw *k* distinct indices via ``Generator.choice(replace=False)``."""
        if k < 0 or n < 0 or k > n:
            raise ValueError(f"cannot sample {k} distinct indices from range({n})")
        return [int(i) for i in self._rng.choice(n, size=k, replace=False)]

    def choose_weighted(self, weights: Sequence[float]) -> int:
        """Pick an index via ``Generator.choice`` with normalised probabilities."""
        w = _check_weights(weights)
        return int(self._rng.choice(len(w), p=w / w.sum()))
