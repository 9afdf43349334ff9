"""pair-sampler: draw a random pair of distinct indices, never a forbidden one.

Two strategies are provided: ``sample_uniform`` (rejection sampling,
exactly uniform over the valid pairs) and ``sample_fast`` (no retries,
biased). Both accept any seeded numpy or stdlib generator as the source
of randomness.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("pair-sampler")
except PackageNotFoundError:
    __version__ = "0.0.0"

from pair_sampler.api import sample_fast, sample_uniform
from pair_sampler.config import PairSamplerConfig, resolve_config, validate_overrides
from pair_sampler.engine import PairSamplingEngine
from pair_sampler.exceptions import (
    ConfigValidationError,
    PairSamplerError,
    PreconditionViolation,
)
from pair_sampler.sampling import FastExceptSampler, PairResult, UniformExceptSampler
from pair_sampler.validation import validate_inputs

__all__ = [
    "ConfigValidationError",
    "FastExceptSampler",
    "PairResult",
    "PairSamplerConfig",
    "PairSamplerError",
    "PairSamplingEngine",
    "PreconditionViolation",
    "UniformExceptSampler",
    "__version__",
    "resolve_config",
    "sample_fast",
    "sample_uniform",
    "validate_inputs",
    "validate_overrides",
]
