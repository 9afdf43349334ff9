"""Tests for the distribution verification helpers."""

from __future__ import annotations

from collections import Counter
from itertools import cycle

import pytest

from pair_sampler.diagnostics import (
    chi_square_statistic,
    collect_distribution,
    rounded_percentages,
    valid_pairs,
)
from pair_sampler.exceptions import PreconditionViolation
from pair_sampler.sampling.types import PairResult


class TestValidPairs:
    def test_minimum_domain(self) -> None:
        assert valid_pairs(3, (0, 2)) == [(0, 1), (1, 2)]

    def test_adjacent_forbidden_pair(self) -> None:
        assert valid_pairs(5, (1, 2)) == [
            (0, 1), (0, 2), (0, 3), (0, 4), (1, 3), (1, 4), (2, 3), (2, 4), (3, 4),
        ]

    def test_order_of_forbidden_pair_irrelevant(self) -> None:
        assert valid_pairs(6, (4, 1)) == valid_pairs(6, (1, 4))

    def test_count(self) -> None:
        assert len(valid_pairs(10, (0, 9))) == 44

    def test_invalid_inputs_raise(self) -> None:
        with pytest.raises(PreconditionViolation):
            valid_pairs(2, (0, 1))


class TestCollectDistribution:
    def test_counts_pairs(self) -> None:
        draws = cycle([PairResult(0, 1), (1, 2), PairResult(0, 1)])
        counts = collect_distribution(lambda: next(draws), trials=6)
        assert counts == Counter({(0, 1): 4, (1, 2): 2})

    def test_rounded_percentages(self) -> None:
        counts = Counter({(1, 2): 501, (0, 1): 499})
        assert rounded_percentages(counts) == {(0, 1): 50, (1, 2): 50}

    def test_rounded_percentages_empty(self) -> None:
        assert rounded_percentages(Counter()) == {}


class TestChiSquareStatistic:
    def test_perfectly_uniform_is_zero(self) -> None:
        counts = {pair: 10 for pair in valid_pairs(4, (0, 3))}
        statistic, dof = chi_square_statistic(counts, 4, (0, 3))
        assert statistic == 0.0
        assert dof == 4

    def test_missing_pairs_count_as_zero(self) -> None:
        statistic, dof = chi_square_statistic({(0, 1): 10}, 3, (0, 2))
        # expected 5 each: (10-5)^2/5 + (0-5)^2/5
        assert statistic == pytest.approx(10.0)
        assert dof == 1

    def test_forbidden_pair_in_counts_raises(self) -> None:
        with pytest.raises(ValueError, match="outside the valid set"):
            chi_square_statistic({(0, 2): 1, (0, 1): 1}, 3, (0, 2))

    def test_no_observations_raises(self) -> None:
        with pytest.raises(ValueError, match="no observations"):
            chi_square_statistic({}, 3, (0, 2))
