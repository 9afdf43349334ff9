"""Shared pytest fixtures for pair-sampler tests.

Provides reusable configuration objects and seeded random sources.
"""

from __future__ import annotations

import pytest

from pair_sampler.config import PairSamplerConfig
from pair_sampler.rng.numpy_source import NumpyRandomSource
from pair_sampler.rng.python_source import PythonRandomSource


@pytest.fixture()
def default_config() -> PairSamplerConfig:
    """PairSamplerConfig with defaults, ignoring any .env file."""
    return PairSamplerConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture()
def seeded_config() -> PairSamplerConfig:
    """Config with a fixed seed and diagnostic mode enabled."""
    return PairSamplerConfig(
        _env_file=None,
        seed=1,
        diagnostic_mode=True,  # type: ignore[call-arg]
    )


@pytest.fixture()
def numpy_source() -> NumpyRandomSource:
    """NumpyRandomSource with a fixed seed for reproducibility."""
    return NumpyRandomSource(seed=1)


@pytest.fixture()
def python_source() -> PythonRandomSource:
    """PythonRandomSource with a fixed seed for reproducibility."""
    return PythonRandomSource(seed=1)
