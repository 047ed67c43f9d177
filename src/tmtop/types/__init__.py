"""Value types shared by the aggregator and the status line formatter."""

from .base import ResponseModel, StrictBaseModel
from .exceptions import (
    AggregationError,
    AliasLookupError,
    DivisionByZeroError,
    NodeStatusError,
    SnapshotError,
    TmtopError,
)
from .status import TendermintNodeInfo, TendermintStatusResponse, TendermintStatusResult
from .validator import (
    ChainValidator,
    GenesisValidatorInfo,
    Validator,
    Validators,
    ValidatorsWithInfo,
    ValidatorWithInfo,
)
from .vote import VOTE_SYMBOLS, Vote

__all__ = [
    "AggregationError",
    "AliasLookupError",
    "ChainValidator",
    "DivisionByZeroError",
    "GenesisValidatorInfo",
    "NodeStatusError",
    "ResponseModel",
    "SnapshotError",
    "StrictBaseModel",
    "TendermintNodeInfo",
    "TendermintStatusResponse",
    "TendermintStatusResult",
    "TmtopError",
    "VOTE_SYMBOLS",
    "Validator",
    "ValidatorWithInfo",
    "Validators",
    "ValidatorsWithInfo",
    "Vote",
]
