"""Tests for FastExceptSampler."""

from __future__ import annotations

import pytest

from pair_sampler.exceptions import PreconditionViolation
from pair_sampler.rng.numpy_source import NumpyRandomSource
from pair_sampler.rng.scripted import ScriptedRandomSource
from pair_sampler.sampling.fast import FastExceptSampler


@pytest.fixture()
def sampler() -> FastExceptSampler:
    return FastExceptSampler()


class TestUnconstrainedBranch:
    """First index not forbidden: second index skips it via the top value."""

    def test_plain_draw(self, sampler: FastExceptSampler) -> None:
        rng = ScriptedRandomSource([1, 0])
        assert sampler.sample(5, (0, 2), rng).as_tuple() == (0, 1)
        assert rng.calls == [("randrange", (0, 5)), ("randrange", (0, 4))]

    def test_collision_maps_to_top_value(self, sampler: FastExceptSampler) -> None:
        rng = ScriptedRandomSource([3, 3])
        assert sampler.sample(5, (0, 2), rng).as_tuple() == (3, 4)

    def test_collision_on_index_zero(self, sampler: FastExceptSampler) -> None:
        rng = ScriptedRandomSource([0, 0])
        assert sampler.sample(5, (1, 2), rng).as_tuple() == (0, 4)

    def test_top_value_as_first_index(self, sampler: FastExceptSampler) -> None:
        """a = length - 1 can never collide: the second draw stops below it."""
        rng = ScriptedRandomSource([4, 3])
        assert sampler.sample(5, (0, 2), rng).as_tuple() == (3, 4)

    def test_may_share_one_forbidden_index(self, sampler: FastExceptSampler) -> None:
        rng = ScriptedRandomSource([4, 2])
        assert sampler.sample(5, (0, 2), rng).as_tuple() == (2, 4)


class TestConstrainedBranch:
    """First index forbidden: second index comes from the gaps around the pair."""

    def test_gap_weights_and_draw(self, sampler: FastExceptSampler) -> None:
        rng = ScriptedRandomSource([2, 2, 4])
        result = sampler.sample(5, (0, 2), rng)
        assert result.as_tuple() == (2, 4)
        assert rng.calls == [
            ("randrange", (0, 5)),
            ("choose_weighted", ((0, 1, 2),)),
            ("randrange", (3, 5)),
        ]

    def test_forbidden_pair_given_reversed(self, sampler: FastExceptSampler) -> None:
        rng = ScriptedRandomSource([0, 1, 1])
        assert sampler.sample(5, (2, 0), rng).as_tuple() == (0, 1)
        assert rng.calls[1] == ("choose_weighted", ((0, 1, 2),))

    def test_adjacent_forbidden_pair_has_empty_middle_gap(
        self, sampler: FastExceptSampler
    ) -> None:
        rng = ScriptedRandomSource([1, 0, 0])
        assert sampler.sample(5, (1, 2), rng).as_tuple() == (0, 1)
        assert rng.calls[1] == ("choose_weighted", ((1, 0, 2),))
        assert rng.calls[2] == ("randrange", (0, 1))

    def test_forbidden_pair_at_both_ends(self, sampler: FastExceptSampler) -> None:
        rng = ScriptedRandomSource([3, 1, 2])
        assert sampler.sample(4, (0, 3), rng).as_tuple() == (2, 3)
        assert rng.calls[1] == ("choose_weighted", ((0, 2, 0),))

    def test_second_forbidden_index_as_first_draw(self, sampler: FastExceptSampler) -> None:
        rng = ScriptedRandomSource([2, 0, 0])
        assert sampler.sample(5, (1, 2), rng).as_tuple() == (0, 2)


class TestFastExceptSampler:
    def test_name(self, sampler: FastExceptSampler) -> None:
        assert sampler.name == "fast"

    def test_never_retries(self, sampler: FastExceptSampler) -> None:
        rng = NumpyRandomSource(seed=0)
        assert all(sampler.sample(4, (0, 3), rng).draws == 1 for _ in range(200))

    def test_preconditions_checked_before_drawing(self, sampler: FastExceptSampler) -> None:
        rng = ScriptedRandomSource([])
        with pytest.raises(PreconditionViolation):
            sampler.sample(5, (1, 5), rng)
        assert rng.calls == []

    def test_output_always_valid(self, sampler: FastExceptSampler) -> None:
        rng = NumpyRandomSource(seed=3)
        for length, deny in [(3, (0, 2)), (3, (1, 0)), (4, (3, 0)), (10, (4, 5)), (50, (0, 49))]:
            for _ in range(500):
                low, high = sampler.sample(length, deny, rng)
                assert 0 <= low < high < length
                assert {low, high} != set(deny)
