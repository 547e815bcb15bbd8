"""CID signature endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pinata_sdk.errors import ValidationError
from pinata_sdk.models.signatures import CidSignature

if TYPE_CHECKING:
    from pinata_sdk.client import PinataClient

SIGNATURE_PATH = "/v3/ipfs/signature/{cid}"


class SignaturesAPI:
    def __init__(self, client: PinataClient) -> None:
        self._client = client

    async def add(self, cid: str, signature: str) -> CidSignature:
        """Attach a signature to a CID the account has pinned."""
        if not cid or not signature:
            raise ValidationError("cid and signature are required")
        req = (
            self._client.new_request("POST", SIGNATURE_PATH)
            .add_path_param("cid", cid)
            .set_json_body({"signature": signature})
        )
        return await req.send(CidSignature.from_dict)

    async def get(self, cid: str) -> CidSignature:
        if not cid:
            raise ValidationError("cid is required")
        req = self._client.new_request("GET", SIGNATURE_PATH).add_path_param("cid", cid)
        return await req.send(CidSignature.from_dict)

    async def remove(self, cid: str) -> None:
        if not cid:
            raise ValidationError("cid is required")
        await self._client.new_request("DELETE", SIGNATURE_PATH).add_path_param(
            "cid", cid,
        ).send()
