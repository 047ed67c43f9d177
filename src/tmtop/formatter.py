"""
Status line rendering for the validator table.

Every validator becomes one fixed-width row:

    " ✅ ❌ 1   25.00 %              my-validator "

The columns are prevote, precommit, 1-based ordinal, voting power share and
name. Each cell is padded or truncated to its configured width, so the rows
stay aligned whatever the name length or the magnitude of the numbers.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable

from tmtop.config import FormatterConfig
from tmtop.types import ValidatorWithInfo
from tmtop.utils import left_pad_and_trim, right_pad_and_trim

logger = logging.getLogger(__name__)

AliasResolver = Callable[[str], Awaitable[str | None]]
"""Async lookup from validator address to alias. None means no alias."""


class StatusLineFormatter:
    """
    Render validator status rows for the dashboard.

    Name resolution prefers the chain registry identity. Validators without
    one are looked up through the injected alias resolver, and the raw
    address is shown when that yields nothing.
    """

    def __init__(
        self,
        alias_resolver: AliasResolver | None = None,
        config: FormatterConfig | None = None,
    ) -> None:
        self._alias_resolver = alias_resolver
        self.config = config or FormatterConfig()

    async def resolve_name(self, row: ValidatorWithInfo) -> str:
        """
        Pick the display name of a validator.

        Resolver errors are logged and absorbed. Task cancellation is not
        an error and propagates to the caller.
        """
        chain_validator = row.chain_validator
        if chain_validator is not None:
            if chain_validator.assigned_address:
                return self.config.key_marker + chain_validator.moniker
            return chain_validator.moniker

        address = row.validator.address
        if self._alias_resolver is None:
            return address

        try:
            alias = await self._alias_resolver(address)
        except Exception as e:
            logger.warning("Alias resolution for %s failed: %s", address, e)
            return address

        return alias or address

    async def format_row(self, row: ValidatorWithInfo) -> str:
        """Render one validator as a fixed-width status line."""
        validator = row.validator
        name = await self.resolve_name(row)
        config = self.config

        cells = [
            validator.prevote.serialize(),
            validator.precommit.serialize(),
            right_pad_and_trim(str(validator.index + 1), config.ordinal_width),
            right_pad_and_trim(f"{validator.voting_power_percent:.2f}", config.percent_width)
            + "%",
            left_pad_and_trim(name, config.name_width),
        ]
        return " " + " ".join(cells) + " "

    async def format_all(self, rows: Iterable[ValidatorWithInfo]) -> list[str]:
        """
        Render every row in order.

        Rows are rendered one after another. No row is dropped or merged.
        """
        return [await self.format_row(row) for row in rows]
