"""Default error-body decoder.

The service does not document its error shape. Bodies seen in the wild include
``{"error": "..."}``, ``{"error": {"reason": ..., "details": ...}}`` and plain
strings, so the body is decoded to whatever JSON value it holds and rendered
as text. Swap in a stricter ErrorDecoder once a schema is agreed.
"""

from __future__ import annotations

import json
from typing import Any

import httpx

from pinata_sdk.errors import APIError, DecodeError


def render_error_body(value: Any) -> str:
    """Render a decoded error body as the message callers match on."""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


class JSONErrorDecoder:
    """Implements ErrorDecoder: any JSON body becomes an APIError."""

    def decode(self, response: httpx.Response) -> Exception:
        try:
            value = response.json()
        except ValueError as exc:
            return DecodeError(
                f"failed to decode error response (HTTP {response.status_code}): {exc}"
            )
        return APIError(
            render_error_body(value),
            status_code=response.status_code,
            response_data=value,
        )
