"""Base class for pair sampling strategies.

Defines the abstract interface shared by the exact-uniform and the fast
strategy. Input validation lives here so that it runs identically before
either strategy touches the random source.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from pair_sampler.validation import validate_inputs

if TYPE_CHECKING:
    from pair_sampler.rng.base import RandomSource
    from pair_sampler.sampling.types import PairResult


class PairSampler(ABC):
    """Abstract base class for pair sampling strategies.

    Implementations draw two distinct indices from ``range(length)`` and
    never return the forbidden pair. Samplers hold no state between calls;
    the only mutable state is the caller's random source.
    """

    name: str = ""

    def sample(self, length: Any, deny: Any, rng: RandomSource) -> PairResult:
        """Draw one valid pair.

        Args:
            length: Number of indexable positions (at least 3).
            deny: The forbidden pair ``(a, b)``, compared as an unordered set.
            rng: Source of randomness, owned by the caller.

        Returns:
            PairResult with ``low < high``.

        Raises:
            PreconditionViolation: If *length* or *deny* violate the contract.
        """
        length, deny = validate_inputs(length, deny)
        return self._sample(length, deny, rng)

    @abstractmethod
    def _sample(self, length: int, deny: tuple[int, int], rng: RandomSource) -> PairResult:
        """Draw one valid pair from already-validated inputs."""
