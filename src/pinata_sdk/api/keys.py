"""API key management endpoints (legacy ``/users`` and v3 ``/v3/pinata/keys``)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pinata_sdk.errors import ValidationError
from pinata_sdk.models.keys import (
    ApiKeyList,
    ApiKeySecret,
    GenerateApiKeyOptions,
    ListApiKeysOptions,
)

if TYPE_CHECKING:
    from pinata_sdk.client import PinataClient


class KeysAPI:
    def __init__(self, client: PinataClient) -> None:
        self._client = client

    async def _generate(self, path: str, options: GenerateApiKeyOptions) -> ApiKeySecret:
        if options is None:
            raise ValidationError("options cannot be None")
        req = self._client.new_request("POST", path).set_json_body(options)
        return await req.send(ApiKeySecret.from_dict)

    async def generate(self, options: GenerateApiKeyOptions) -> ApiKeySecret:
        return await self._generate("/users/generateApiKey", options)

    async def generate_v3(self, options: GenerateApiKeyOptions) -> ApiKeySecret:
        return await self._generate("/v3/pinata/keys", options)

    async def list(self) -> ApiKeyList:
        return await self._client.new_request("GET", "/users/apiKeys").send(
            ApiKeyList.from_dict
        )

    async def list_v3(self, options: ListApiKeysOptions | None = None) -> ApiKeyList:
        req = self._client.new_request("GET", "/v3/pinata/keys")
        if options is not None:
            if options.name:
                req.add_query_param("name", options.name)
            if options.offset > 0:
                req.add_query_param("offset", options.offset)
            if options.revoked is not None:
                req.add_query_param("revoked", options.revoked)
            if options.limited_use is not None:
                req.add_query_param("limitedUse", options.limited_use)
            if options.exhausted is not None:
                req.add_query_param("exhausted", options.exhausted)
        return await req.send(ApiKeyList.from_dict)

    async def revoke(self, api_key: str) -> None:
        if not api_key:
            raise ValidationError("api key is required")
        await self._client.new_request("PUT", "/users/revokeApiKey").set_json_body(
            {"apiKey": api_key},
        ).send()

    async def revoke_v3(self, key: str) -> None:
        if not key:
            raise ValidationError("key is required")
        await self._client.new_request("PUT", "/v3/pinata/keys/{key}").add_path_param(
            "key", key,
        ).send()
