"""Tests for RandomSourceRegistry."""

from __future__ import annotations

import pytest

from pair_sampler.config import PairSamplerConfig
from pair_sampler.rng.numpy_source import NumpyRandomSource
from pair_sampler.rng.python_source import PythonRandomSource, SystemRandomSource
from pair_sampler.rng.registry import RandomSourceRegistry
from pair_sampler.rng.scripted import ScriptedRandomSource


class _DummySource(ScriptedRandomSource):
    """Concrete source constructible without arguments."""

    def __init__(self) -> None:
        super().__init__([])


class TestRandomSourceRegistry:
    """Tests for the decorator-based source registry."""

    def setup_method(self) -> None:
        """Save registry state before each test."""
        self._saved_registry = dict(RandomSourceRegistry._registry)

    def teardown_method(self) -> None:
        """Restore registry state after each test."""
        RandomSourceRegistry._registry = self._saved_registry

    def test_builtins_registered(self) -> None:
        assert RandomSourceRegistry.get("numpy") is NumpyRandomSource
        assert RandomSourceRegistry.get("python") is PythonRandomSource
        assert RandomSourceRegistry.get("system") is SystemRandomSource

    def test_register_and_get(self) -> None:
        @RandomSourceRegistry.register("test_source")
        class TestSource(_DummySource):
            pass

        assert RandomSourceRegistry.get("test_source") is TestSource

    def test_duplicate_name_rejected(self) -> None:
        with pytest.raises(ValueError, match="already registered"):
            RandomSourceRegistry.register("numpy")(_DummySource)
        assert RandomSourceRegistry.get("numpy") is NumpyRandomSource

    def test_non_source_class_rejected(self) -> None:
        with pytest.raises(TypeError, match="must subclass RandomSource"):
            RandomSourceRegistry.register("not_a_source")(dict)  # type: ignore[arg-type]
        assert "not_a_source" not in RandomSourceRegistry.list_available()

    def test_get_unknown_raises_key_error(self) -> None:
        with pytest.raises(KeyError, match="no_such_source.*Available: .*numpy"):
            RandomSourceRegistry.get("no_such_source")

    def test_list_available_is_sorted(self) -> None:
        RandomSourceRegistry.register("zzz_source")(_DummySource)
        RandomSourceRegistry.register("aaa_source")(_DummySource)
        available = RandomSourceRegistry.list_available()
        assert available == sorted(available)
        assert {"aaa_source", "numpy", "zzz_source"} <= set(available)

    def test_build_from_config(self) -> None:
        config = PairSamplerConfig(
            _env_file=None,
            random_source_type="python",
            seed=4,  # type: ignore[call-arg]
        )
        source = RandomSourceRegistry.build(config)
        assert isinstance(source, PythonRandomSource)
        assert source.randrange(0, 1000) == PythonRandomSource(seed=4).randrange(0, 1000)

    def test_build_unknown_source(self) -> None:
        config = PairSamplerConfig(
            _env_file=None,
            random_source_type="bogus",  # type: ignore[call-arg]
        )
        with pytest.raises(KeyError, match="bogus"):
            RandomSourceRegistry.build(config)
