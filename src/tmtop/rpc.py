"""
Tendermint RPC client for node identity.

The dashboard header shows which network the monitored node is on and which
consensus engine version it runs. Both come from the node's `/status`
endpoint.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from tmtop.config import DEFAULT_RPC_TIMEOUT, NODE_STATUS_ENDPOINT
from tmtop.types import NodeStatusError, TendermintNodeInfo, TendermintStatusResponse

logger = logging.getLogger(__name__)


async def fetch_node_status(
    rpc_host: str,
    *,
    timeout: float = DEFAULT_RPC_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> TendermintNodeInfo:
    """
    Query a node for its network and version.

    Args:
        rpc_host: Base URL of the node RPC (e.g., "http://localhost:26657").
        timeout: Request timeout in seconds.
        transport: Optional transport override, used to plug in test doubles.

    Returns:
        The node identity from the status response.

    Raises:
        NodeStatusError: If the request fails or the response is malformed.
    """
    full_url = f"{rpc_host.rstrip('/')}{NODE_STATUS_ENDPOINT}"
    logger.debug("Fetching node status from %s", full_url)

    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            response = await client.get(full_url)
            response.raise_for_status()
            status = TendermintStatusResponse.model_validate_json(response.content)

    except httpx.RequestError as exc:
        raise NodeStatusError(
            f"Network error while connecting to {exc.request.url}: {exc}"
        ) from exc
    except httpx.HTTPStatusError as exc:
        raise NodeStatusError(
            f"HTTP error {exc.response.status_code}: {exc.response.text[:200]}"
        ) from exc
    except ValidationError as exc:
        raise NodeStatusError(f"Malformed status response from {full_url}: {exc}") from exc

    node_info = status.result.node_info
    logger.info("Connected to %s (version %s)", node_info.network, node_info.version)
    return node_info
