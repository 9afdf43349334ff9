"""Data types for the pair sampling subsystem."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class PairResult:
    """An ordered pair of distinct indices returned by a sampler.

    Unpacks like a tuple: ``low, high = result``.

    Attributes:
        low: The smaller index.
        high: The larger index.
        draws: Number of pair draws consumed to produce the result. Purely
            diagnostic; excluded from equality and hashing.
    """

    low: int
    high: int
    draws: int = field(default=1, compare=False)

    def __iter__(self) -> Iterator[int]:
        yield self.low
        yield self.high

    def as_tuple(self) -> tuple[int, int]:
        """Return ``(low, high)``."""
        return (self.low, self.high)
