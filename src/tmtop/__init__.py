"""
tmtop: voting power aggregation and status rendering for consensus round monitors.

Provides:
- Round aggregates: total voting power, prevote and precommit agreement
- Fixed-width status lines per validator, with alias-based name resolution
"""

from .aggregator import (
    total_voting_power,
    total_voting_power_precommitted_percent,
    total_voting_power_prevoted_percent,
    voting_power_percents,
)
from .aliases import GenesisAliasResolver, fetch_validator_infos
from .formatter import AliasResolver, StatusLineFormatter

__all__ = [
    "AliasResolver",
    "GenesisAliasResolver",
    "StatusLineFormatter",
    "fetch_validator_infos",
    "total_voting_power",
    "total_voting_power_precommitted_percent",
    "total_voting_power_prevoted_percent",
    "voting_power_percents",
]
