"""Authenticator protocol - stamps credentials onto outgoing requests."""

from __future__ import annotations

from typing import Protocol

import httpx


class Authenticator(Protocol):
    """Holds credentials and knows which header(s) carry them."""

    def stamp(self, request: httpx.Request) -> None:
        """Set the authentication header(s) on a request about to be sent."""
        ...
