"""Vote state of a validator in one phase of a consensus round."""

from enum import Enum

from typing_extensions import Final


class Vote(Enum):
    """
    A validator's observed participation in a prevote or precommit phase.

    The values double as the spelling used in snapshot files.
    """

    NOT_VOTED = "not_voted"
    """No vote seen from this validator in the current round."""

    VOTED = "voted"
    """Voted for the proposed block."""

    VOTED_ZERO = "voted_zero"
    """
    Signed a vote that carries no block (a nil vote).

    It shows participation but does not count toward agreement unless the
    caller asks to count disagreeing votes.
    """

    def serialize(self) -> str:
        """Return the single-symbol display form of this vote."""
        return VOTE_SYMBOLS[self]


VOTE_SYMBOLS: Final[dict[Vote, str]] = {
    Vote.VOTED: "✅",
    Vote.VOTED_ZERO: "🤷",
    Vote.NOT_VOTED: "❌",
}
"""Display symbol for each vote state."""
