"""Exactly uniform pair sampling by rejection.

Draws 2-subsets of the domain uniformly and redraws only when the draw
reproduces the forbidden pair. Conditioning a uniform distribution on an
event keeps it uniform over that event, so every valid pair has
probability ``1 / (C(length, 2) - 1)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pair_sampler.sampling.base import PairSampler
from pair_sampler.sampling.registry import PairSamplerRegistry
from pair_sampler.sampling.types import PairResult

if TYPE_CHECKING:
    from pair_sampler.rng.base import RandomSource


@PairSamplerRegistry.register("uniform")
class UniformExceptSampler(PairSampler):
    """Rejection sampler with an exactly uniform output distribution.

    The retry loop has no cap: a cap would bias the distribution. Expected
    draws are ``1 / (1 - 1 / C(length, 2))``, i.e. 1.5 for ``length=3``
    and quickly approaching 1.
    """

    name = "uniform"

    def _sample(self, length: int, deny: tuple[int, int], rng: RandomSource) -> PairResult:
        deny_a, deny_b = deny
        draws = 0
        while True:
            a, b = rng.sample_indices(length, 2)
            draws += 1
            if (a != deny_a and a != deny_b) or (b != deny_a and b != deny_b):
                break
        if a > b:
            a, b = b, a
        return PairResult(a, b, draws)
