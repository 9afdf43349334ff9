"""Pair sampling subsystem for pair-sampler.

Two strategies for drawing an ordered pair of distinct indices that is
never the forbidden pair: exact-uniform rejection and fast single-pass.
"""

from pair_sampler.sampling.base import PairSampler
from pair_sampler.sampling.fast import FastExceptSampler
from pair_sampler.sampling.registry import PairSamplerRegistry
from pair_sampler.sampling.types import PairResult
from pair_sampler.sampling.uniform import UniformExceptSampler

__all__ = [
    "FastExceptSampler",
    "PairResult",
    "PairSampler",
    "PairSamplerRegistry",
    "UniformExceptSampler",
]
