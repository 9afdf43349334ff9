"""Registry for pair sampling strategies.

Uses a decorator pattern for registration, enabling both built-in and
third-party strategies to register themselves at import time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from pair_sampler.sampling.base import PairSampler


class PairSamplerRegistry:
    """Registry mapping string names to PairSampler classes.

    Built-in strategies register via the ``@PairSamplerRegistry.register()``
    decorator. The ``build()`` class method instantiates the strategy named
    by the config's ``strategy`` field.
    """

    _registry: ClassVar[dict[str, type[PairSampler]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[PairSampler]], type[PairSampler]]:
        """Decorator that registers a PairSampler class under *name*.

        Args:
            name: Identifier used in config ``strategy``.

        Returns:
            Decorator that registers the class and returns it unchanged.

        Raises:
            ValueError: If *name* is already registered.
        """

        def decorator(klass: type[PairSampler]) -> type[PairSampler]:
            if name in cls._registry:
                raise ValueError(f"Pair sampler '{name}' is already registered")
            cls._registry[name] = klass
            return klass

        return decorator

    @classmethod
    def get(cls, name: str) -> type[PairSampler]:
        """Return the sampler class registered under *name*.

        Raises:
            KeyError: If *name* is not registered.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown pair sampler '{name}'. Available: {available}")
        return cls._registry[name]

    @classmethod
    def build(cls, config: Any) -> PairSampler:
        """Instantiate the sampler specified by *config.strategy*.

        Args:
            config: A PairSamplerConfig (or compatible object) with a
                ``strategy`` attribute.

        Returns:
            A ready-to-use PairSampler instance.
        """
        return cls.get(config.strategy)()

    @classmethod
    def list_registered(cls) -> list[str]:
        """Return sorted list of registered sampler names."""
        return sorted(cls._registry)
