"""Diagnostic logging subsystem for pair-sampler.

Provides immutable per-call sampling records and a configurable logger
that supports none/summary/full verbosity and in-memory diagnostic mode.
"""

from pair_sampler.logging.logger import SamplingLogger
from pair_sampler.logging.types import PairSamplingRecord

__all__ = [
    "PairSamplingRecord",
    "SamplingLogger",
]
