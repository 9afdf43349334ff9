"""Function-style entry points for one-off pair sampling."""

from __future__ import annotations

from typing import Any

from pair_sampler.rng.factory import as_random_source
from pair_sampler.sampling.fast import FastExceptSampler
from pair_sampler.sampling.types import PairResult
from pair_sampler.sampling.uniform import UniformExceptSampler

_UNIFORM = UniformExceptSampler()
_FAST = FastExceptSampler()


def sample_uniform(length: int, forbidden_pair: tuple[int, int], rng: Any = None) -> PairResult:
    """Draw a pair uniformly from every pair except *forbidden_pair*.

    Args:
        length: Number of indexable positions (at least 3).
        forbidden_pair: The pair that must never be returned, in either order.
        rng: Anything :func:`~pair_sampler.rng.as_random_source` accepts.

    Returns:
        PairResult with ``low < high``.

    Raises:
        PreconditionViolation: On invalid *length* or *forbidden_pair*.
    """
    return _UNIFORM.sample(length, forbidden_pair, as_random_source(rng))


def sample_fast(length: int, forbidden_pair: tuple[int, int], rng: Any = None) -> PairResult:
    """Draw a pair other than *forbidden_pair* without retrying.

    Faster than :func:`sample_uniform` but the result is not uniformly
    distributed over the valid pairs.

    Args:
        length: Number of indexable positions (at least 3).
        forbidden_pair: The pair that must never be returned, in either order.
        rng: Anything :func:`~pair_sampler.rng.as_random_source` accepts.

    Returns:
        PairResult with ``low < high``.

    Raises:
        PreconditionViolation: On invalid *length* or *forbidden_pair*.
    """
    return _FAST.sample(length, forbidden_pair, as_random_source(rng))
