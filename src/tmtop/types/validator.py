"""Validator types for one consensus round."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import field_validator

from .base import ResponseModel, StrictBaseModel
from .vote import Vote


class Validator(StrictBaseModel):
    """
    One participant of the current consensus round.

    Built fresh from RPC vote data every polling cycle and read-only after.
    """

    index: int
    """Zero-based position in the validator set, used for the ordinal column."""

    address: str
    """Canonical validator identifier in the chain's own format."""

    voting_power: int
    """Weight of this validator. May exceed 64 bits."""

    voting_power_percent: Decimal = Decimal(0)
    """Share of the total voting power this validator holds, precomputed by the caller."""

    prevote: Vote = Vote.NOT_VOTED
    """Observed prevote for the current round."""

    precommit: Vote = Vote.NOT_VOTED
    """Observed precommit for the current round."""

    is_proposer: bool = False
    """Whether this validator proposed the block of the current round."""


Validators = tuple[Validator, ...]
"""Validators of one round in display order."""


class ChainValidator(StrictBaseModel):
    """Chain registry identity of a validator."""

    moniker: str
    """Human-readable name chosen by the operator."""

    assigned_address: str = ""
    """Secondary consensus address the validator votes under, if any."""


class ValidatorWithInfo(StrictBaseModel):
    """A round participant paired with its optional chain identity."""

    validator: Validator
    """The round participant."""

    chain_validator: ChainValidator | None = None
    """Registry identity, absent when the validator is not known to the chain registry."""


ValidatorsWithInfo = tuple[ValidatorWithInfo, ...]
"""Display rows of one round in display order."""


class GenesisValidatorInfo(ResponseModel):
    """
    One entry of the genesis alias document.

    The document is a JSON object keyed by validator address.
    """

    alias: str = ""
    nam_address: str = ""
    consensus_key_pk: str = ""
    net_address: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        """Read JSON null as an empty string, like an absent field."""
        return "" if v is None else v
