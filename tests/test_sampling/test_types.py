"""Tests for PairResult."""

from __future__ import annotations

import pytest

from pair_sampler.sampling.types import PairResult


class TestPairResult:
    def test_unpacks_like_a_tuple(self) -> None:
        low, high = PairResult(1, 4)
        assert (low, high) == (1, 4)

    def test_as_tuple(self) -> None:
        assert PairResult(0, 2, draws=5).as_tuple() == (0, 2)

    def test_draws_ignored_in_equality_and_hash(self) -> None:
        assert PairResult(0, 2, draws=1) == PairResult(0, 2, draws=7)
        assert hash(PairResult(0, 2, draws=1)) == hash(PairResult(0, 2, draws=7))

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            PairResult(0, 1).low = 3  # type: ignore[misc]
