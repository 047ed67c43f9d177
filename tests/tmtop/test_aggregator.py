"""Tests for round-level voting power aggregation."""

from decimal import Decimal
from fractions import Fraction

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tmtop.aggregator import (
    total_voting_power,
    total_voting_power_precommitted_percent,
    total_voting_power_prevoted_percent,
    voting_power_percents,
)
from tmtop.types import DivisionByZeroError, Vote

from tests.tmtop.helpers import make_validators

EPSILON = Decimal("1e-9")

powers_strategy = st.lists(st.integers(min_value=0, max_value=2**80), min_size=1, max_size=30)
votes_strategy = st.sampled_from(list(Vote))


class TestTotalVotingPower:
    """Tests for total_voting_power()."""

    def test_sums_weights(self) -> None:
        """The total is the plain sum of all weights."""
        assert total_voting_power(make_validators([100, 100, 200])) == 400

    def test_empty_set_is_zero(self) -> None:
        """An empty validator set has zero voting power."""
        assert total_voting_power(()) == 0

    def test_beyond_64_bits(self) -> None:
        """Sums never overflow."""
        validators = make_validators([2**64, 2**64, 2**70])
        assert total_voting_power(validators) == 2**65 + 2**70

    @given(powers=powers_strategy, data=st.data())
    def test_order_independent(self, powers: list[int], data: st.DataObject) -> None:
        """Shuffling the validators never changes the total."""
        validators = make_validators(powers)
        shuffled = tuple(data.draw(st.permutations(validators)))

        assert total_voting_power(validators) == sum(powers)
        assert total_voting_power(shuffled) == sum(powers)


class TestPrevotedPercent:
    """Tests for total_voting_power_prevoted_percent()."""

    def test_strict_and_counting_disagreeing(self) -> None:
        """Nil prevotes only count when asked to."""
        validators = make_validators(
            [100, 100, 200],
            prevotes=[Vote.VOTED, Vote.VOTED_ZERO, Vote.NOT_VOTED],
        )

        assert total_voting_power_prevoted_percent(validators, False) == Decimal(25)
        assert total_voting_power_prevoted_percent(validators, True) == Decimal(50)

    def test_formats_to_two_decimals(self) -> None:
        """Results print cleanly with two decimals."""
        validators = make_validators(
            [100, 100, 200],
            prevotes=[Vote.VOTED, Vote.VOTED_ZERO, Vote.NOT_VOTED],
        )
        assert f"{total_voting_power_prevoted_percent(validators, False):.2f}" == "25.00"

    def test_repeating_fraction(self) -> None:
        """One third of the power prints as 33.33."""
        validators = make_validators(
            [1, 1, 1], prevotes=[Vote.VOTED, Vote.NOT_VOTED, Vote.NOT_VOTED]
        )
        percent = total_voting_power_prevoted_percent(validators, False)

        assert f"{percent:.2f}" == "33.33"
        assert abs(percent - Decimal(100) / Decimal(3)) < EPSILON

    def test_precommits_are_ignored(self) -> None:
        """Only prevotes contribute to the prevote percentage."""
        validators = make_validators([100], prevotes=[Vote.NOT_VOTED], precommits=[Vote.VOTED])
        assert total_voting_power_prevoted_percent(validators, True) == Decimal(0)

    def test_huge_weights(self) -> None:
        """Weights far beyond 64 bits keep exact ratios."""
        validators = make_validators([2**90, 2**90], prevotes=[Vote.VOTED, Vote.NOT_VOTED])
        assert total_voting_power_prevoted_percent(validators, False) == Decimal(50)

    def test_empty_set_raises(self) -> None:
        """An empty set has no defined percentage."""
        with pytest.raises(DivisionByZeroError) as exc_info:
            total_voting_power_prevoted_percent((), False)
        assert exc_info.value.phase == "prevote"

    def test_all_zero_weights_raise(self) -> None:
        """Zero total power is reported even when validators exist."""
        validators = make_validators([0, 0], prevotes=[Vote.VOTED, Vote.VOTED])
        with pytest.raises(DivisionByZeroError):
            total_voting_power_prevoted_percent(validators, True)

    @given(powers=powers_strategy, count_disagreeing=st.booleans())
    def test_everyone_voted_is_full_agreement(
        self, powers: list[int], count_disagreeing: bool
    ) -> None:
        """When all validators prevoted, agreement is 100%."""
        powers = [power + 1 for power in powers]
        validators = make_validators(powers, prevotes=[Vote.VOTED] * len(powers))

        percent = total_voting_power_prevoted_percent(validators, count_disagreeing)
        assert abs(percent - Decimal(100)) < EPSILON

    @given(powers=powers_strategy, data=st.data())
    def test_counting_disagreeing_never_lowers(
        self, powers: list[int], data: st.DataObject
    ) -> None:
        """Counting nil votes can only raise the percentage."""
        powers = [power + 1 for power in powers]
        prevotes = data.draw(st.lists(votes_strategy, min_size=len(powers), max_size=len(powers)))
        validators = make_validators(powers, prevotes=prevotes)

        strict = total_voting_power_prevoted_percent(validators, False)
        lenient = total_voting_power_prevoted_percent(validators, True)
        assert strict <= lenient

    @given(powers=powers_strategy, data=st.data())
    def test_matches_exact_ratio(self, powers: list[int], data: st.DataObject) -> None:
        """The percentage matches the exact rational value within epsilon."""
        powers = [power + 1 for power in powers]
        prevotes = data.draw(st.lists(votes_strategy, min_size=len(powers), max_size=len(powers)))
        validators = make_validators(powers, prevotes=prevotes)

        voted = sum(p for p, vote in zip(powers, prevotes, strict=True) if vote is Vote.VOTED)
        exact = Fraction(voted * 100, sum(powers))

        percent = total_voting_power_prevoted_percent(validators, False)
        assert abs(Fraction(percent) - exact) < Fraction(1, 10**9)

    @given(powers=powers_strategy, data=st.data())
    def test_order_independent(self, powers: list[int], data: st.DataObject) -> None:
        """Shuffling the validators never changes the percentage."""
        powers = [power + 1 for power in powers]
        prevotes = data.draw(st.lists(votes_strategy, min_size=len(powers), max_size=len(powers)))
        validators = make_validators(powers, prevotes=prevotes)
        shuffled = tuple(data.draw(st.permutations(validators)))

        assert total_voting_power_prevoted_percent(
            shuffled, True
        ) == total_voting_power_prevoted_percent(validators, True)


class TestPrecommittedPercent:
    """Tests for total_voting_power_precommitted_percent()."""

    def test_strict_and_counting_disagreeing(self) -> None:
        """Nil precommits only count when asked to."""
        validators = make_validators(
            [100, 100, 200],
            precommits=[Vote.VOTED, Vote.VOTED_ZERO, Vote.NOT_VOTED],
        )

        assert total_voting_power_precommitted_percent(validators, False) == Decimal(25)
        assert total_voting_power_precommitted_percent(validators, True) == Decimal(50)

    def test_prevotes_are_ignored(self) -> None:
        """Only precommits contribute to the precommit percentage."""
        validators = make_validators([100], prevotes=[Vote.VOTED], precommits=[Vote.NOT_VOTED])
        assert total_voting_power_precommitted_percent(validators, True) == Decimal(0)

    def test_empty_set_raises(self) -> None:
        """An empty set has no defined percentage."""
        with pytest.raises(DivisionByZeroError) as exc_info:
            total_voting_power_precommitted_percent((), True)
        assert exc_info.value.phase == "precommit"

    def test_all_zero_weights_raise(self) -> None:
        """Zero total power is reported even when validators exist."""
        validators = make_validators([0, 0], precommits=[Vote.VOTED, Vote.VOTED])
        with pytest.raises(DivisionByZeroError) as exc_info:
            total_voting_power_precommitted_percent(validators, False)
        assert exc_info.value.phase == "precommit"

    def test_huge_weights(self) -> None:
        """Weights far beyond 64 bits keep exact ratios."""
        validators = make_validators(
            [2**100, 3 * 2**100], precommits=[Vote.VOTED, Vote.NOT_VOTED]
        )
        assert total_voting_power_precommitted_percent(validators, False) == Decimal(25)

    @given(powers=powers_strategy, count_disagreeing=st.booleans())
    def test_everyone_voted_is_full_agreement(
        self, powers: list[int], count_disagreeing: bool
    ) -> None:
        """When all validators precommitted, agreement is 100%."""
        powers = [power + 1 for power in powers]
        validators = make_validators(powers, precommits=[Vote.VOTED] * len(powers))

        percent = total_voting_power_precommitted_percent(validators, count_disagreeing)
        assert abs(percent - Decimal(100)) < EPSILON

    @given(powers=powers_strategy, data=st.data())
    def test_counting_disagreeing_never_lowers(
        self, powers: list[int], data: st.DataObject
    ) -> None:
        """Counting nil votes can only raise the percentage."""
        powers = [power + 1 for power in powers]
        precommits = data.draw(
            st.lists(votes_strategy, min_size=len(powers), max_size=len(powers))
        )
        validators = make_validators(powers, precommits=precommits)

        strict = total_voting_power_precommitted_percent(validators, False)
        lenient = total_voting_power_precommitted_percent(validators, True)
        assert strict <= lenient

    @given(powers=powers_strategy, data=st.data(), count_disagreeing=st.booleans())
    def test_matches_exact_ratio(
        self, powers: list[int], data: st.DataObject, count_disagreeing: bool
    ) -> None:
        """The percentage matches the exact rational value within epsilon."""
        powers = [power + 1 for power in powers]
        precommits = data.draw(
            st.lists(votes_strategy, min_size=len(powers), max_size=len(powers))
        )
        validators = make_validators(powers, precommits=precommits)

        agreeing = {Vote.VOTED, Vote.VOTED_ZERO} if count_disagreeing else {Vote.VOTED}
        voted = sum(p for p, vote in zip(powers, precommits, strict=True) if vote in agreeing)
        exact = Fraction(voted * 100, sum(powers))

        percent = total_voting_power_precommitted_percent(validators, count_disagreeing)
        assert abs(Fraction(percent) - exact) < Fraction(1, 10**9)

    @given(powers=powers_strategy, data=st.data())
    def test_order_independent(self, powers: list[int], data: st.DataObject) -> None:
        """Shuffling the validators never changes the percentage."""
        powers = [power + 1 for power in powers]
        precommits = data.draw(
            st.lists(votes_strategy, min_size=len(powers), max_size=len(powers))
        )
        validators = make_validators(powers, precommits=precommits)
        shuffled = tuple(data.draw(st.permutations(validators)))

        assert total_voting_power_precommitted_percent(
            shuffled, False
        ) == total_voting_power_precommitted_percent(validators, False)

    @given(powers=powers_strategy, data=st.data())
    def test_independent_of_prevotes(self, powers: list[int], data: st.DataObject) -> None:
        """Changing prevotes never moves the precommit percentage."""
        powers = [power + 1 for power in powers]
        size = len(powers)
        precommits = data.draw(st.lists(votes_strategy, min_size=size, max_size=size))
        first = data.draw(st.lists(votes_strategy, min_size=size, max_size=size))
        second = data.draw(st.lists(votes_strategy, min_size=size, max_size=size))

        assert total_voting_power_precommitted_percent(
            make_validators(powers, prevotes=first, precommits=precommits), True
        ) == total_voting_power_precommitted_percent(
            make_validators(powers, prevotes=second, precommits=precommits), True
        )


class TestVotingPowerPercents:
    """Tests for voting_power_percents()."""

    def test_fills_shares_in_order(self) -> None:
        """Each validator gets its share of the total, order preserved."""
        validators = make_validators([100, 100, 200])
        result = voting_power_percents(validators)

        assert [v.voting_power_percent for v in result] == [Decimal(25), Decimal(25), Decimal(50)]
        assert [v.index for v in result] == [0, 1, 2]

    def test_input_is_not_modified(self) -> None:
        """The original validators keep their percentages."""
        validators = make_validators([1, 3])
        voting_power_percents(validators)
        assert all(v.voting_power_percent == Decimal(0) for v in validators)

    def test_empty_set(self) -> None:
        """An empty set stays empty."""
        assert voting_power_percents(()) == ()

    def test_zero_total_raises(self) -> None:
        """Shares are undefined for zero total power."""
        with pytest.raises(DivisionByZeroError) as exc_info:
            voting_power_percents(make_validators([0, 0]))
        assert exc_info.value.phase == "total"
