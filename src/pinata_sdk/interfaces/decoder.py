"""ErrorDecoder protocol - turns a non-2xx response into an exception."""

from __future__ import annotations

from typing import Protocol

import httpx


class ErrorDecoder(Protocol):
    """Builds the exception raised for an error response.

    The body has already been read when this is called.
    """

    def decode(self, response: httpx.Response) -> Exception:
        """Return (not raise) the exception describing ``response``."""
        ...
