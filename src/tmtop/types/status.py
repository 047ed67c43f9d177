"""
Tendermint node status response.

Only the fields used to label the dashboard are decoded:

    {"result": {"node_info": {"version": "0.37.2", "network": "namada-1"}}}
"""

from .base import ResponseModel


class TendermintNodeInfo(ResponseModel):
    """Identity of the queried node."""

    version: str
    """Consensus engine version string."""

    network: str
    """Chain ID the node participates in."""


class TendermintStatusResult(ResponseModel):
    """The `result` object of a status response."""

    node_info: TendermintNodeInfo


class TendermintStatusResponse(ResponseModel):
    """Top-level JSON-RPC envelope of `/status`."""

    result: TendermintStatusResult
