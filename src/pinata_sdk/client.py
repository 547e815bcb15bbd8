"""Pinata API client - owns the connection pool and hands out request builders."""

from __future__ import annotations

import asyncio
import logging

import httpx

from pinata_sdk.api.groups import GroupsAPI
from pinata_sdk.api.keys import KeysAPI
from pinata_sdk.api.pinning import PinningAPI
from pinata_sdk.api.signatures import SignaturesAPI
from pinata_sdk.api.swaps import SwapsAPI
from pinata_sdk.decoder import JSONErrorDecoder
from pinata_sdk.interfaces.auth import Authenticator
from pinata_sdk.interfaces.decoder import ErrorDecoder
from pinata_sdk.models.config import ClientConfig
from pinata_sdk.models.pinning import AuthTestResponse
from pinata_sdk.pool import WorkerPool
from pinata_sdk.request import RequestBuilder

log = logging.getLogger(__name__)

USER_AGENT = "pinata-sdk-python"


class PinataClient:
    """Async client for the Pinata API.

    Each instance owns its own httpx connection pool, which is safe to share
    between concurrent requests. Endpoint groups hang off the client::

        async with PinataClient(Auth.with_jwt(token)) as client:
            pin = await client.pinning.pin_file("photo.png")
            await client.groups.add_cids(group_id, [pin.ipfs_hash])
    """

    def __init__(
        self,
        auth: Authenticator,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        error_decoder: ErrorDecoder | None = None,
    ) -> None:
        cfg = config or ClientConfig()
        self.config = cfg
        self.base_url = cfg.base_url
        self.auth = auth
        self.error_decoder: ErrorDecoder = error_decoder or JSONErrorDecoder()
        self.http = httpx.AsyncClient(
            timeout=httpx.Timeout(cfg.timeout),
            limits=httpx.Limits(
                max_connections=cfg.max_connections,
                max_keepalive_connections=cfg.max_keepalive_connections,
                keepalive_expiry=cfg.keepalive_expiry,
            ),
            headers={"User-Agent": USER_AGENT},
            transport=transport,
        )
        # Batch workers still running after a fail-fast return.
        self._background: set[asyncio.Task] = set()

        self.pinning = PinningAPI(self)
        self.groups = GroupsAPI(self)
        self.signatures = SignaturesAPI(self)
        self.swaps = SwapsAPI(self)
        self.keys = KeysAPI(self)

    @classmethod
    def from_config(
        cls,
        cfg: ClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> PinataClient:
        return cls(cfg.auth(), config=cfg, transport=transport)

    async def __aenter__(self) -> PinataClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Wait for detached batch workers, then release the connection pool."""
        if self._background:
            log.debug("Waiting for %d background workers", len(self._background))
            await asyncio.gather(*self._background, return_exceptions=True)
        await self.http.aclose()

    def new_request(self, method: str, path: str) -> RequestBuilder:
        return RequestBuilder(self, method, path)

    def worker_pool(self, handler) -> WorkerPool:
        return WorkerPool(
            handler, max_workers=self.config.max_workers, background=self._background,
        )

    async def test_authentication(self) -> AuthTestResponse:
        """Check the configured credentials against ``/data/testAuthentication``."""
        return await self.new_request("GET", "/data/testAuthentication").send(
            AuthTestResponse.from_dict
        )
