"""Tests for the Tendermint status response models."""

import pytest
from pydantic import ValidationError

from tmtop.types import TendermintStatusResponse


class TestStatusResponse:
    """Tests for decoding `/status` responses."""

    def test_decodes_node_info(self) -> None:
        """Network and version are read from result.node_info."""
        response = TendermintStatusResponse.model_validate_json(
            '{"result": {"node_info": {"version": "0.37.2", "network": "namada-1"}}}'
        )

        assert response.result.node_info.version == "0.37.2"
        assert response.result.node_info.network == "namada-1"

    def test_ignores_other_fields(self) -> None:
        """The rest of the RPC envelope is ignored."""
        response = TendermintStatusResponse.model_validate(
            {
                "jsonrpc": "2.0",
                "result": {
                    "node_info": {"version": "v", "network": "n", "moniker": "m"},
                    "sync_info": {},
                },
            }
        )
        assert response.result.node_info.network == "n"

    def test_missing_node_info_is_rejected(self) -> None:
        """A response without node_info does not validate."""
        with pytest.raises(ValidationError):
            TendermintStatusResponse.model_validate({"result": {}})
