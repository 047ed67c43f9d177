"""
Genesis alias lookup for validators without a chain registry identity.

Some validators are not known to the chain registry yet, for example right
after genesis. Their operators registered a human-readable alias in a public
JSON document instead:

    {
        "<validator address>": {
            "alias": "my-validator",
            "nam_address": "tnam1...",
            "consensus_key_pk": "tpknam1...",
            "net_address": "1.2.3.4:26656"
        }
    }

The document is fetched whole on every lookup. There is no cache and no
retry: a failed fetch only means the dashboard shows raw addresses until the
next refresh.
"""

from __future__ import annotations

import asyncio
import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from tmtop.config import DEFAULT_LOOKUP_TIMEOUT, GENESIS_ALIAS_URL
from tmtop.metrics import alias_lookups
from tmtop.types import AliasLookupError, GenesisValidatorInfo

logger = logging.getLogger(__name__)

GenesisValidatorInfos = dict[str, GenesisValidatorInfo]
"""Alias document entries keyed by validator address."""

_INFOS_ADAPTER = TypeAdapter(GenesisValidatorInfos)


async def fetch_validator_infos(
    url: str,
    *,
    timeout: float = DEFAULT_LOOKUP_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> GenesisValidatorInfos:
    """
    Fetch and decode the genesis alias document.

    Args:
        url: Location of the alias document.
        timeout: Deadline in seconds for the whole lookup, body included.
        transport: Optional transport override, used to plug in test doubles.

    Returns:
        Mapping from validator address to its genesis info.

    Raises:
        AliasLookupError: On transport errors, non-2xx responses, a malformed
            body, or when the deadline passes.
    """
    # httpx timeouts bound each socket operation, not the request as a whole.
    try:
        async with asyncio.timeout(timeout):
            async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
                response = await client.get(url)
                response.raise_for_status()
                return _INFOS_ADAPTER.validate_json(response.content)

    except TimeoutError as exc:
        raise AliasLookupError(url, f"timed out after {timeout}s") from exc
    except httpx.RequestError as exc:
        raise AliasLookupError(url, f"network error: {exc!r}") from exc
    except httpx.HTTPStatusError as exc:
        raise AliasLookupError(url, f"HTTP error {exc.response.status_code}") from exc
    except ValidationError as exc:
        raise AliasLookupError(url, f"malformed document: {exc.error_count()} errors") from exc


class GenesisAliasResolver:
    """
    Resolve validator addresses to aliases from the genesis alias document.

    Instances are async callables suitable as the alias resolver of a
    `StatusLineFormatter`. Lookup failures degrade to "no alias".
    Cancellation of the awaiting task is not a failure and propagates.
    """

    def __init__(
        self,
        url: str = GENESIS_ALIAS_URL,
        *,
        timeout: float = DEFAULT_LOOKUP_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._transport = transport

    async def __call__(self, address: str) -> str | None:
        """Return the alias registered for `address`, or None."""
        try:
            infos = await fetch_validator_infos(
                self.url, timeout=self.timeout, transport=self._transport
            )
        except AliasLookupError as e:
            logger.warning("%s", e.message)
            alias_lookups.labels(outcome="failure").inc()
            return None

        info = infos.get(address)
        if info is None or not info.alias:
            logger.debug("No genesis alias for %s", address)
            alias_lookups.labels(outcome="miss").inc()
            return None

        alias_lookups.labels(outcome="hit").inc()
        return info.alias
