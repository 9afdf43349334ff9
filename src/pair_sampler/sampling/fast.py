"""Fast, non-uniform pair sampling without retries.

The first index is uniform over the whole domain. When it lands on a
forbidden index, the second index is drawn uniformly from everything
except the two forbidden indices; otherwise it is uniform over everything
except the first. The joint distribution over pairs is therefore biased
towards pairs that share an index with the forbidden pair. Callers that
need exact uniformity should use :class:`UniformExceptSampler`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pair_sampler.sampling.base import PairSampler
from pair_sampler.sampling.registry import PairSamplerRegistry
from pair_sampler.sampling.types import PairResult

if TYPE_CHECKING:
    from pair_sampler.rng.base import RandomSource


@PairSamplerRegistry.register("fast")
class FastExceptSampler(PairSampler):
    """Constant-work sampler: one or two integer draws plus at most one
    weighted choice, never a retry.
    """

    name = "fast"

    def _sample(self, length: int, deny: tuple[int, int], rng: RandomSource) -> PairResult:
        deny_lo, deny_hi = sorted(deny)
        a = rng.randrange(0, length)

        if a == deny_lo or a == deny_hi:
            b = self._draw_avoiding_pair(length, deny_lo, deny_hi, rng)
        else:
            # Uniform over range(length) minus {a}: the draw that would
            # collide with a takes the otherwise unreachable top value.
            b = rng.randrange(0, length - 1)
            if b == a:
                b = length - 1

        if a > b:
            a, b = b, a
        return PairResult(a, b)

    @staticmethod
    def _draw_avoiding_pair(length: int, deny_lo: int, deny_hi: int, rng: RandomSource) -> int:
        """Draw uniformly from ``range(length)`` minus ``{deny_lo, deny_hi}``.

        The three gaps around the forbidden indices are chosen with
        probability proportional to their size; empty gaps get weight 0.
        """
        gaps = (
            range(0, deny_lo),
            range(deny_lo + 1, deny_hi),
            range(deny_hi + 1, length),
        )
        gap = gaps[rng.choose_weighted([len(g) for g in gaps])]
        return rng.randrange(gap.start, gap.stop)
