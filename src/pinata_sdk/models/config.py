"""Client configuration model."""

from __future__ import annotations

from dataclasses import dataclass

from pinata_sdk.auth import Auth

DEFAULT_BASE_URL = "https://api.pinata.cloud"


@dataclass
class ClientConfig:
    """Complete client configuration."""

    # API
    base_url: str = DEFAULT_BASE_URL

    # Auth (JWT wins when both are set)
    jwt: str = ""
    api_key: str = ""
    api_secret: str = ""

    # HTTP transport
    timeout: float = 30.0  # seconds per request; some deployments use 90
    max_connections: int = 100
    max_keepalive_connections: int = 100
    keepalive_expiry: float = 90.0  # seconds an idle pooled connection is kept

    # Batch operations
    max_workers: int = 5

    log_level: str = "info"

    def auth(self) -> Auth:
        return Auth(api_key=self.api_key, api_secret=self.api_secret, jwt=self.jwt)

    def has_credentials(self) -> bool:
        return bool(self.jwt or (self.api_key and self.api_secret))
