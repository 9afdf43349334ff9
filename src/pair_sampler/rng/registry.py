"""Registry for random sources, keyed by ``config.random_source_type``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from pair_sampler.rng.base import RandomSource

if TYPE_CHECKING:
    from collections.abc import Callable

    from pair_sampler.config import PairSamplerConfig

logger = logging.getLogger("pair_sampler")


class RandomSourceRegistry:
    """Maps source names to RandomSource subclasses.

    Sources register at import time with ``@register_random_source(name)``;
    :meth:`build` turns a config into a constructed, possibly seeded source.
    """

    _registry: ClassVar[dict[str, type[RandomSource]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[RandomSource]], type[RandomSource]]:
        """Decorator that registers a source class under *name*.

        Raises:
            ValueError: If *name* is already taken.
            TypeError: If the decorated class is not a RandomSource subclass.
        """

        def decorator(source_cls: type[RandomSource]) -> type[RandomSource]:
            if name in cls._registry:
                raise ValueError(f"Random source '{name}' is already registered")
            if not (isinstance(source_cls, type) and issubclass(source_cls, RandomSource)):
                raise TypeError(f"Random source '{name}' must subclass RandomSource")
            cls._registry[name] = source_cls
            return source_cls

        return decorator

    @classmethod
    def get(cls, name: str) -> type[RandomSource]:
        """Return the source class registered under *name*.

        Raises:
            KeyError: If *name* is not registered.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown random source '{name}'. Available: {available}")
        return cls._registry[name]

    @classmethod
    def build(cls, config: PairSamplerConfig) -> RandomSource:
        """Instantiate the source named by ``config.random_source_type``.

        Seedable sources pick up ``config.seed`` through
        :meth:`RandomSource.from_config`.
        """
        source = cls.get(config.random_source_type).from_config(config)
        logger.debug("Built random source %r (seed=%r)", source.name, config.seed)
        return source

    @classmethod
    def list_available(cls) -> list[str]:
        """Return sorted registered source names."""
        return sorted(cls._registry)


register_random_source = RandomSourceRegistry.register
