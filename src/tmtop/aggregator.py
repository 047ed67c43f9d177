"""
Voting power aggregation for one consensus round.

Reduces a validator set to the figures shown above the validator table:
the total voting power and the share of it that prevoted or precommitted.

Arithmetic rules:

- Voting powers are Python ints, so sums are exact at any magnitude.
- Every percentage is computed with a single decimal division of two exact
  integers, at PERCENT_PRECISION significant digits.
- Iteration order never affects a result because everything is summed
  before the one division.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from decimal import Decimal, localcontext

from tmtop.config import PERCENT_PRECISION
from tmtop.types import DivisionByZeroError, Validator, Validators, Vote


def total_voting_power(validators: Iterable[Validator]) -> int:
    """Sum the voting power of all validators. Zero for an empty set."""
    return sum((validator.voting_power for validator in validators), 0)


def _percent(part: int, total: int, phase: str) -> Decimal:
    """
    Compute `part / total * 100` with one rounding step.

    Multiplying before converting keeps the numerator exact.

    Raises:
        DivisionByZeroError: If `total` is zero.
    """
    if total == 0:
        raise DivisionByZeroError(phase)
    with localcontext() as ctx:
        ctx.prec = PERCENT_PRECISION
        return Decimal(part * 100) / Decimal(total)


def _agreeing_percent(
    validators: Validators,
    vote_of: Callable[[Validator], Vote],
    count_disagreeing: bool,
    phase: str,
) -> Decimal:
    counted = {Vote.VOTED, Vote.VOTED_ZERO} if count_disagreeing else {Vote.VOTED}

    total = 0
    agreeing = 0
    for validator in validators:
        total += validator.voting_power
        if vote_of(validator) in counted:
            agreeing += validator.voting_power

    return _percent(agreeing, total, phase)


def total_voting_power_prevoted_percent(
    validators: Validators, count_disagreeing: bool
) -> Decimal:
    """
    Share of the total voting power that prevoted, as a percentage.

    Args:
        validators: Validators of the round.
        count_disagreeing: Also count nil prevotes (`Vote.VOTED_ZERO`).

    Returns:
        A value in [0, 100] for non-negative weights.

    Raises:
        DivisionByZeroError: If the total voting power is zero.
    """
    return _agreeing_percent(
        validators, lambda validator: validator.prevote, count_disagreeing, "prevote"
    )


def total_voting_power_precommitted_percent(
    validators: Validators, count_disagreeing: bool
) -> Decimal:
    """
    Share of the total voting power that precommitted, as a percentage.

    Same rules as `total_voting_power_prevoted_percent`, over precommits.
    """
    return _agreeing_percent(
        validators, lambda validator: validator.precommit, count_disagreeing, "precommit"
    )


def voting_power_percents(validators: Validators) -> Validators:
    """
    Fill in each validator's share of the total voting power.

    Returns new validators in the same order. The input is not modified.

    Raises:
        DivisionByZeroError: If the total voting power is zero and the set is non-empty.
    """
    total = total_voting_power(validators)
    return tuple(
        validator.copy(voting_power_percent=_percent(validator.voting_power, total, "total"))
        for validator in validators
    )
