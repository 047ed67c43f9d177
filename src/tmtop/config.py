"""
Global configuration for tmtop.

This module contains environment-specific settings shared by the aggregator,
the status line formatter and the network clients.
"""

import os
from dataclasses import dataclass

from typing_extensions import Final

_SUPPORTED_TMTOP_ENVS: list[str] = ["prod", "test"]

TMTOP_ENV = os.environ.get("TMTOP_ENV", "prod").lower()
"""The environment flag ('prod' or 'test'). Defaults to 'prod'."""

if TMTOP_ENV not in _SUPPORTED_TMTOP_ENVS:
    raise ValueError(
        f"Invalid TMTOP_ENV environment variable: '{TMTOP_ENV}'. "
        f"Supported values: {_SUPPORTED_TMTOP_ENVS}"
    )

# --- Remote Endpoints ---

GENESIS_ALIAS_URL: Final = os.environ.get(
    "TMTOP_GENESIS_ALIAS_URL",
    "https://namada.info/shielded-expedition.88f17d1d14/output/genesis_tm_address_to_alias.json",
)
"""Well-known JSON document mapping validator addresses to genesis aliases."""

NODE_STATUS_ENDPOINT: Final = "/status"
"""Tendermint RPC endpoint reporting node identity and network."""

# --- Timeouts ---

DEFAULT_LOOKUP_TIMEOUT: Final = 5.0 if TMTOP_ENV == "prod" else 0.5
"""
Upper bound in seconds for one alias document fetch.

The lookup runs inside row formatting, so a hung server would otherwise
freeze the whole dashboard refresh.
"""

DEFAULT_RPC_TIMEOUT: Final = 10.0
"""HTTP request timeout in seconds for node RPC calls."""

# --- Arithmetic ---

PERCENT_PRECISION: Final = 50
"""
Significant decimal digits used for the single percentage division.

Fifty digits is far beyond what two printed decimals need, so the rounded
display never shows division artifacts.
"""

# --- Status Line Layout ---

ORDINAL_WIDTH: Final = 3
"""Display columns reserved for the 1-based validator ordinal."""

PERCENT_WIDTH: Final = 6
"""Display columns reserved for the voting power share, excluding '%'."""

NAME_WIDTH: Final = 25
"""Display columns reserved for the resolved validator name."""

KEY_MARKER: Final = "🔑 "
"""Prefix for validators voting under an assigned consensus key."""


@dataclass(frozen=True, slots=True)
class FormatterConfig:
    """Column layout of a rendered validator status line."""

    ordinal_width: int = ORDINAL_WIDTH
    """Width of the ordinal field."""

    percent_width: int = PERCENT_WIDTH
    """Width of the voting power percentage field."""

    name_width: int = NAME_WIDTH
    """Width of the name field."""

    key_marker: str = KEY_MARKER
    """Marker prepended to names of validators with an assigned address."""
