"""Pinata credentials: an API key/secret pair or a JWT bearer token."""

from __future__ import annotations

from dataclasses import dataclass

import httpx


@dataclass(frozen=True)
class Auth:
    """Credentials for the Pinata API.

    When ``jwt`` is set it takes precedence and the key/secret pair is never sent.
    Empty credentials are not rejected here; the service answers 401 for them.
    """

    api_key: str = ""
    api_secret: str = ""
    jwt: str = ""

    @classmethod
    def with_jwt(cls, jwt: str) -> Auth:
        return cls(jwt=jwt)

    def stamp(self, request: httpx.Request) -> None:
        if self.jwt:
            request.headers["Authorization"] = f"Bearer {self.jwt}"
            return
        request.headers["pinata_api_key"] = self.api_key
        request.headers["pinata_secret_api_key"] = self.api_secret

    def __repr__(self) -> str:
        kind = "jwt" if self.jwt else "api_key"
        return f"Auth({kind}=***)"
