"""Abstract base class for all random sources.

Every random source, whether a seeded PRNG, the OS CSPRNG, or a scripted
test double, implements this interface. Subclasses must implement the
three abstract members: ``name``, ``randrange()``, and ``random()``.
The ABC provides default ``sample_indices()`` and ``choose_weighted()``
built on top of them; subclasses may override both with native versions.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from pair_sampler.config import PairSamplerConfig


class RandomSource(ABC):
    """Abstract base for the randomness consumed by pair samplers.

    A source is owned by a single caller at a time and is not safe for
    concurrent use without external synchronisation.
    """

    @classmethod
    def from_config(cls, config: PairSamplerConfig) -> RandomSource:
        """Build a source from configuration.

        The default ignores the config entirely. Seedable sources override
        this to honour ``config.seed``.

        Args:
            config: Active configuration.

        Returns:
            A new source instance.
        """
        return cls()

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source identifier (e.g., ``'numpy'``, ``'system'``)."""

    @abstractmethod
    def randrange(self, low: int, high: int) -> int:
        """Return an integer drawn uniformly from ``[low, high)``.

        Raises:
            ValueError: If the range is empty.
        """

    @abstractmethod
    def random(self) -> float:
        """Return a float drawn uniformly from ``[0, 1)``."""

    def sample_indices(self, n: int, k: int) -> list[int]:
        """Return *k* distinct indices drawn uniformly from ``range(n)``.

        Every *k*-subset is equally likely. The default uses Floyd's
        algorithm, which needs exactly *k* calls to ``randrange()``.

        Args:
            n: Size of the index domain.
            k: Number of distinct indices to draw.

        Returns:
            List of *k* distinct indices, in no particular order.

        Raises:
            ValueError: If ``k > n`` or either is negative.
        """
        if k < 0 or n < 0 or k > n:
            raise ValueError(f"cannot sample {k} distinct indices from range({n})")
        chosen: list[int] = []
        seen: set[int] = set()
        for j in range(n - k, n):
            t = self.randrange(0, j + 1)
            pick = j if t in seen else t
            seen.add(pick)
            chosen.append(pick)
        return chosen

    def choose_weighted(self, weights: Sequence[float]) -> int:
        """Return an index chosen with probability proportional to its weight.

        Builds a CDF from the cumulative weights and locates ``random() *
        total`` in it. Indices with zero weight are never returned.

        Args:
            weights: Non-negative weights, at least one of them positive.

        Returns:
            Index into *weights*.

        Raises:
            ValueError: If a weight is negative or all weights are zero.
        """
        w = _check_weights(weights)
        cdf = np.cumsum(w)
        total = float(cdf[-1])
        idx = int(np.searchsorted(cdf, self.random() * total, side="right"))
        if idx >= len(w):
            # random() * total rounded up to total; take the last live index.
            idx = int(np.flatnonzero(w)[-1])
        return idx

    def close(self) -> None:  # noqa: B027
        """Release resources. No-op for in-process generators."""


def _check_weights(weights: Sequence[float]) -> np.ndarray:
    """Validate *weights* and return them as a float64 array.

    Raises:
        ValueError: If *weights* is empty, has a negative entry, or sums to zero.
    """
    w = np.asarray(weights, dtype=np.float64)
    if w.ndim != 1 or w.size == 0:
        raise ValueError("weights must be a non-empty 1-D sequence")
    if np.any(w < 0) or not np.all(np.isfinite(w)):
        raise ValueError(f"weights must be finite and non-negative, got {list(weights)!r}")
    if float(w.sum()) <= 0.0:
        raise ValueError("total of weights must be greater than zero")
    return w
