"""
Validator snapshot loader.

A snapshot captures one round's validator set in YAML (JSON works too,
being a YAML subset):

    validators:
    - address: 4A1B...E9
      voting_power: 1000000
      prevote: voted
      precommit: not_voted
      is_proposer: true
      moniker: alice
      assigned_address: 7C2D...01
    - address: 88F0...3A
      voting_power: 250000
      prevote: voted_zero
      precommit: voted_zero

Indices are assigned densely in file order. A missing `voting_power_percent`
is computed from the total voting power of the snapshot.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from tmtop.aggregator import voting_power_percents
from tmtop.types import (
    ChainValidator,
    DivisionByZeroError,
    SnapshotError,
    Validator,
    ValidatorsWithInfo,
    ValidatorWithInfo,
    Vote,
)

logger = logging.getLogger(__name__)


class SnapshotEntry(BaseModel):
    """Single validator entry of a snapshot file."""

    address: str
    """Validator address."""

    voting_power: int
    """Voting power as an integer of any size."""

    prevote: Vote = Vote.NOT_VOTED
    precommit: Vote = Vote.NOT_VOTED
    is_proposer: bool = False

    voting_power_percent: Decimal | None = None
    """Share of the total. Computed by the loader when omitted."""

    moniker: str | None = None
    """Chain registry name. Without it the validator has no chain identity."""

    assigned_address: str = ""
    """Assigned consensus address, only meaningful together with `moniker`."""


class Snapshot(BaseModel):
    """Contents of a snapshot file."""

    validators: list[SnapshotEntry] = Field(default_factory=list)


def load_snapshot(path: Path) -> ValidatorsWithInfo:
    """
    Load a validator snapshot from a YAML file.

    Args:
        path: Path to the snapshot file.

    Returns:
        Display rows in file order.

    Raises:
        SnapshotError: If the file cannot be read, parsed or validated.
    """
    try:
        with path.open() as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise SnapshotError(f"Cannot read snapshot {path}: {e}") from e

    try:
        # YAML returns None for empty file
        snapshot = Snapshot.model_validate(data or {})
    except ValidationError as e:
        raise SnapshotError(f"Invalid snapshot {path}: {e}") from e

    validators = tuple(
        Validator(
            index=index,
            address=entry.address,
            voting_power=entry.voting_power,
            prevote=entry.prevote,
            precommit=entry.precommit,
            is_proposer=entry.is_proposer,
        )
        for index, entry in enumerate(snapshot.validators)
    )

    try:
        computed = voting_power_percents(validators)
    except DivisionByZeroError:
        logger.warning("Snapshot %s has zero total voting power", path)
        computed = validators

    rows = []
    for entry, validator in zip(snapshot.validators, computed, strict=True):
        if entry.voting_power_percent is not None:
            validator = validator.copy(voting_power_percent=entry.voting_power_percent)

        chain_validator = None
        if entry.moniker is not None:
            chain_validator = ChainValidator(
                moniker=entry.moniker,
                assigned_address=entry.assigned_address,
            )

        rows.append(ValidatorWithInfo(validator=validator, chain_validator=chain_validator))

    logger.info("Loaded %d validators from %s", len(rows), path)
    return tuple(rows)
