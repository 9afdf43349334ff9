"""Helpers for verifying the output distribution of a pair sampler.

Used by the statistical tests and handy when checking a custom random
source: enumerate the valid pairs, collect an empirical distribution, and
measure how far it is from uniform.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable, Mapping
from itertools import combinations

import numpy as np

from pair_sampler.validation import validate_inputs

DEFAULT_TRIALS = 100_000


def valid_pairs(length: int, deny: tuple[int, int]) -> list[tuple[int, int]]:
    """Return every ``(low, high)`` pair a sampler may produce, in order.

    Raises:
        PreconditionViolation: On invalid *length* or *deny*.
    """
    length, deny = validate_inputs(length, deny)
    forbidden = tuple(sorted(deny))
    return [pair for pair in combinations(range(length), 2) if pair != forbidden]


def collect_distribution(
    draw: Callable[[], Iterable[int]],
    trials: int = DEFAULT_TRIALS,
) -> Counter[tuple[int, int]]:
    """Call *draw* ``trials`` times and count the resulting pairs.

    Args:
        draw: Zero-argument callable returning a pair (a PairResult or tuple).
        trials: Number of calls.

    Returns:
        Counter keyed by ``(low, high)``.
    """
    counts: Counter[tuple[int, int]] = Counter()
    for _ in range(trials):
        low, high = draw()
        counts[(low, high)] += 1
    return counts


def rounded_percentages(counts: Mapping[tuple[int, int], int]) -> dict[tuple[int, int], int]:
    """Convert counts to whole percentages of the total, sorted by pair."""
    total = sum(counts.values())
    if total == 0:
        return {}
    return {pair: round(100 * n / total) for pair, n in sorted(counts.items())}


def chi_square_statistic(
    counts: Mapping[tuple[int, int], int],
    length: int,
    deny: tuple[int, int],
) -> tuple[float, int]:
    """Pearson chi-square of *counts* against the uniform distribution.

    Valid pairs missing from *counts* are treated as observed zero times.

    Args:
        counts: Observed pair counts.
        length: Domain size the counts were drawn from.
        deny: The forbidden pair.

    Returns:
        Tuple of (statistic, degrees of freedom).

    Raises:
        ValueError: If *counts* contains a pair outside the valid set.
    """
    pairs = valid_pairs(length, deny)
    unexpected = set(counts) - set(pairs)
    if unexpected:
        raise ValueError(f"observed pairs outside the valid set: {sorted(unexpected)}")

    observed = np.array([counts.get(pair, 0) for pair in pairs], dtype=np.float64)
    expected = observed.sum() / len(pairs)
    if expected == 0:
        raise ValueError("no observations")
    statistic = float(np.sum((observed - expected) ** 2 / expected))
    return statistic, len(pairs) - 1
