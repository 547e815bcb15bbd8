"""Request builder - assembles, sends and decodes one Pinata API call."""

from __future__ import annotations

import dataclasses
import json
import logging
import re
from datetime import date, datetime
from typing import TYPE_CHECKING, Any, Callable, TypeVar
from urllib.parse import quote, urlencode

import httpx

from pinata_sdk.errors import (
    DecodeError,
    MissingPathParameterError,
    NetworkError,
    SerializationError,
    ValidationError,
)

if TYPE_CHECKING:
    from pinata_sdk.client import PinataClient

log = logging.getLogger(__name__)

T = TypeVar("T")

JSON_CONTENT_TYPE = "application/json"

_PLACEHOLDER = re.compile(r"\{([^{}]*)\}")


def format_query_value(value: Any) -> str:
    """Stringify a query parameter value.

    Booleans must come out as ``true``/``false``; the service rejects ``True``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def _json_default(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_json(value: Any) -> bytes:
    """Encode ``value`` as compact JSON with sorted keys.

    Raises SerializationError when the value has no JSON representation.
    """
    try:
        text = json.dumps(
            value,
            default=_json_default,
            separators=(",", ":"),
            sort_keys=True,
            allow_nan=False,
            ensure_ascii=False,
        )
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"failed to encode JSON body: {exc}") from exc
    return text.encode("utf-8")


class RequestBuilder:
    """Fluent description of a single HTTP call against the Pinata API.

    Configuration methods return the builder so calls can be chained. A builder
    is consumed by one ``send()`` and must not be shared between tasks.
    """

    def __init__(self, client: PinataClient, method: str, path: str) -> None:
        self._client = client
        self.method = method.upper()
        self.path = path
        self.path_params: dict[str, str] = {}
        self.query_params: dict[str, str] = {}
        self.headers: dict[str, str] = {}
        self.body: bytes | None = None
        self.content_type: str = ""

    # ── Configuration ──────────────────────────────────────

    def add_path_param(self, name: str, value: Any) -> RequestBuilder:
        self.path_params[name] = str(value)
        return self

    def add_query_param(self, name: str, value: Any) -> RequestBuilder:
        self.query_params[name] = format_query_value(value)
        return self

    def add_header(self, name: str, value: str) -> RequestBuilder:
        self.headers[name] = value
        return self

    def set_body(self, body: bytes | str | None, content_type: str) -> RequestBuilder:
        if isinstance(body, str):
            body = body.encode("utf-8")
        self.body = body
        self.content_type = content_type
        return self

    def set_json_body(self, value: Any) -> RequestBuilder:
        """Serialize ``value`` as the JSON request body.

        On SerializationError the previous body and content type are kept.
        """
        return self.set_body(encode_json(value), JSON_CONTENT_TYPE)

    # ── URL ────────────────────────────────────────────────

    def build_url(self) -> str:
        """Return the absolute URL with path placeholders and query applied.

        Only placeholders actually present in the path are checked; unused
        path params are ignored.
        """

        def _substitute(match: re.Match[str]) -> str:
            name = match.group(1)
            if name not in self.path_params:
                raise MissingPathParameterError(name)
            return quote(str(self.path_params[name]), safe="")

        path = _PLACEHOLDER.sub(_substitute, self.path)
        url = f"{self._client.base_url.rstrip('/')}{path}"
        if self.query_params:
            url = f"{url}?{urlencode(sorted(self.query_params.items()))}"
        return url

    # ── Dispatch ───────────────────────────────────────────

    def _build_request(self) -> httpx.Request:
        url = self.build_url()
        try:
            request = self._client.http.build_request(
                self.method, url, content=self.body,
            )
        except httpx.InvalidURL as exc:
            raise ValidationError(f"invalid url {url}: {exc}") from exc
        for name, value in self.headers.items():
            request.headers[name] = value
        self._client.auth.stamp(request)
        if self.body is not None:
            request.headers["Content-Type"] = self.content_type
        return request

    async def send(self, decode: Callable[[Any], T] | None = None) -> T | None:
        """Execute the request.

        With ``decode=None`` the response body is discarded and None returned.
        Otherwise the JSON body is passed to ``decode`` (e.g. a model's
        ``from_dict``) and its result returned.

        Raises MissingPathParameterError, ValidationError (malformed URL),
        NetworkError, APIError or DecodeError.
        """
        request = self._build_request()
        log.debug("%s %s", request.method, request.url)

        try:
            response = await self._client.http.send(request)
        except httpx.RequestError as exc:
            raise NetworkError(
                f"{request.method} {request.url} failed: {exc!r}"
            ) from exc

        try:
            log.debug(
                "%s %s -> %d (%d bytes)",
                request.method, request.url.path, response.status_code,
                len(response.content),
            )
            if not 200 <= response.status_code < 300:
                raise self._client.error_decoder.decode(response)
            if decode is None:
                return None
            return _decode_body(response, decode)
        finally:
            await response.aclose()


def _decode_body(response: httpx.Response, decode: Callable[[Any], T]) -> T:
    try:
        value = response.json()
    except ValueError as exc:
        raise DecodeError(f"failed to decode response body: {exc}") from exc
    try:
        return decode(value)
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise DecodeError(f"unexpected response shape: {exc!r}") from exc
