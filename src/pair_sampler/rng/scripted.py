"""Scripted random source for deterministic tests.

Replays a fixed list of integer draws so tests can drive each branch of a
sampler explicitly, including sources that misbehave by reproducing the
forbidden pair many times in a row.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from pair_sampler.rng.base import RandomSource


class ScriptedRandomSource(RandomSource):
    """Replay a fixed sequence of draws and record every request.

    Each ``randrange()`` and ``choose_weighted()`` call consumes one draw;
    ``sample_indices(n, k)`` consumes *k*; ``random()`` consumes one and
    returns it as a float. Draws are checked against the requested range,
    so a script that does not match the sampler's calls fails loudly.

    Args:
        draws: The values to hand out, in order.
    """

    def __init__(self, draws: Iterable[Any]) -> None:
        self._draws = list(draws)
        self._pos = 0
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    @property
    def name(self) -> str:
        """Return ``'scripted'``."""
        return "scripted"

    @property
    def remaining(self) -> int:
        """Number of draws not yet consumed."""
        return len(self._draws) - self._pos

    def _next(self) -> Any:
        if self._pos >= len(self._draws):
            raise RuntimeError(f"scripted random source exhausted after {self._pos} draws")
        value = self._draws[self._pos]
        self._pos += 1
        return value

    def randrange(self, low: int, high: int) -> int:
        self.calls.append(("randrange", (low, high)))
        value = self._next()
        if not low <= value < high:
            raise ValueError(f"scripted draw {value} outside [{low}, {high})")
        return value

    def random(self) -> float:
        self.calls.append(("random", ()))
        return float(self._next())

    def sample_indices(self, n: int, k: int) -> list[int]:
        self.calls.append(("sample_indices", (n, k)))
        values = [self._next() for _ in range(k)]
        if any(not 0 <= v < n for v in values) or len(set(values)) != k:
            raise ValueError(f"scripted draws {values} are not {k} distinct indices in range({n})")
        return values

    def choose_weighted(self, weights: Sequence[float]) -> int:
        self.calls.append(("choose_weighted", (tuple(weights),)))
        value = self._next()
        if not 0 <= value < len(weights) or weights[value] <= 0:
            raise ValueError(f"scripted choice {value} has no weight in {list(weights)}")
        return value
