"""Random source subsystem for pair-sampler.

Re-exports the ABC, registry, coercion helper, and all built-in source
implementations for convenient access::

    from pair_sampler.rng import RandomSource, RandomSourceRegistry
    from pair_sampler.rng import NumpyRandomSource, as_random_source
"""

from pair_sampler.rng.base import RandomSource
from pair_sampler.rng.factory import as_random_source
from pair_sampler.rng.numpy_source import NumpyRandomSource
from pair_sampler.rng.python_source import PythonRandomSource, SystemRandomSource
from pair_sampler.rng.registry import RandomSourceRegistry, register_random_source
from pair_sampler.rng.scripted import ScriptedRandomSource

__all__ = [
    "NumpyRandomSource",
    "PythonRandomSource",
    "RandomSource",
    "RandomSourceRegistry",
    "ScriptedRandomSource",
    "SystemRandomSource",
    "as_random_source",
    "register_random_source",
]
