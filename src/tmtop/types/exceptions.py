"""Exception hierarchy for tmtop."""

from __future__ import annotations


class TmtopError(Exception):
    """
    Base exception for all tmtop errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class AggregationError(TmtopError):
    """Base class for errors while reducing a validator set to round metrics."""


class DivisionByZeroError(AggregationError):
    """
    Raised when a percentage is requested over zero total voting power.

    Happens for an empty validator set or one where every weight is zero.
    The caller decides how to render the undefined value.

    Attributes:
        phase: The quantity being computed ("prevote", "precommit" or "total").
    """

    def __init__(self, phase: str) -> None:
        self.phase = phase
        super().__init__(f"Cannot compute {phase} percentage: total voting power is zero")


class AliasLookupError(TmtopError):
    """
    Raised when the genesis alias document cannot be fetched or decoded.

    Attributes:
        url: The document URL that failed.
    """

    def __init__(self, url: str, detail: str) -> None:
        self.url = url
        super().__init__(f"Alias lookup at {url} failed: {detail}")


class NodeStatusError(TmtopError):
    """Raised when a node's status endpoint cannot be queried or decoded."""


class SnapshotError(TmtopError):
    """Raised when a validator snapshot file cannot be read or validated."""
