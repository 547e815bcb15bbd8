"""CID swap endpoints (map a CID to a replacement served by a gateway)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pinata_sdk.errors import ValidationError
from pinata_sdk.models.signatures import SwapHistory, SwapRecord

if TYPE_CHECKING:
    from pinata_sdk.client import PinataClient

SWAP_PATH = "/v3/ipfs/swap/{cid}"


def _data(body: dict[str, Any]) -> Any:
    return body.get("data")


class SwapsAPI:
    def __init__(self, client: PinataClient) -> None:
        self._client = client

    async def add(self, cid: str, swap_cid: str) -> SwapRecord:
        if not cid or not swap_cid:
            raise ValidationError("cid and swap cid are required")
        req = (
            self._client.new_request("PUT", SWAP_PATH)
            .add_path_param("cid", cid)
            .set_json_body({"swapCid": swap_cid})
        )
        return await req.send(SwapRecord.from_envelope)

    async def history(self, cid: str, domain: str) -> SwapHistory:
        """Swaps recorded for ``cid`` on the given gateway domain."""
        if not cid or not domain:
            raise ValidationError("cid and domain are required")
        req = (
            self._client.new_request("GET", SWAP_PATH)
            .add_path_param("cid", cid)
            .add_query_param("domain", domain)
        )
        return await req.send(SwapHistory.from_dict)

    async def remove(self, cid: str) -> Any:
        """Remove the swap for ``cid``; returns the ``data`` member of the reply."""
        if not cid:
            raise ValidationError("cid is required")
        req = self._client.new_request("DELETE", SWAP_PATH).add_path_param("cid", cid)
        return await req.send(_data)
