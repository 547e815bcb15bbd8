"""Exceptions raised by the Pinata client."""

from __future__ import annotations

from typing import Any


class PinataError(Exception):
    """Base exception for every error raised by pinata_sdk."""


class ValidationError(PinataError, ValueError):
    """A required argument was missing or empty. Raised before any request is sent."""


class MissingPathParameterError(PinataError):
    """A ``{name}`` placeholder in the path template had no value."""

    def __init__(self, name: str) -> None:
        super().__init__(f"path parameter {name} not found in path params")
        self.name = name


class SerializationError(PinataError, TypeError):
    """A request body value could not be encoded as JSON."""


class NetworkError(PinataError):
    """The transport could not complete the request (DNS, refused, reset, timeout)."""


class APIError(PinataError):
    """The service answered with a non-2xx status.

    The message is the rendered error body. Its shape is not documented by the
    service, so match on message content rather than on ``response_data`` keys.
    """

    def __init__(
        self,
        message: str = "",
        status_code: int | None = None,
        response_data: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data


class DecodeError(PinataError):
    """A response body could not be parsed into the expected shape."""


class BatchItemError(PinataError):
    """One item of a batch operation failed. The original error is ``__cause__``."""

    def __init__(self, message: str, item: str) -> None:
        super().__init__(message)
        self.item = item
