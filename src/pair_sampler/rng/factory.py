"""Coerce caller-supplied randomness into a RandomSource."""

from __future__ import annotations

import random as _random
from typing import Any

import numpy as np

from pair_sampler.rng.base import RandomSource
from pair_sampler.rng.numpy_source import NumpyRandomSource
from pair_sampler.rng.python_source import PythonRandomSource


def as_random_source(rng: Any = None) -> RandomSource:
    """Wrap *rng* so samplers can draw from it.

    Accepted inputs:
        - ``None``: a fresh, unseeded :class:`NumpyRandomSource`.
        - ``int``: seed for a new :class:`NumpyRandomSource`.
        - ``numpy.random.Generator``: shared, wrapped as-is.
        - ``random.Random`` (including ``SystemRandom``): shared, wrapped as-is.
        - any :class:`RandomSource`: returned unchanged.

    Args:
        rng: The randomness to coerce.

    Returns:
        A RandomSource drawing from *rng*.

    Raises:
        TypeError: If *rng* is none of the accepted types.
    """
    if isinstance(rng, RandomSource):
        return rng
    if rng is None:
        return NumpyRandomSource()
    if isinstance(rng, np.random.Generator):
        return NumpyRandomSource(generator=rng)
    if isinstance(rng, _random.Random):
        return PythonRandomSource(generator=rng)
    if isinstance(rng, (int, np.integer)) and not isinstance(rng, bool):
        return NumpyRandomSource(seed=int(rng))
    raise TypeError(f"Cannot use {type(rng).__name__!r} as a random source")
