"""Async client for the Pinata IPFS pinning API."""

from pinata_sdk.auth import Auth
from pinata_sdk.client import PinataClient
from pinata_sdk.config import load_config
from pinata_sdk.errors import (
    APIError,
    BatchItemError,
    DecodeError,
    MissingPathParameterError,
    NetworkError,
    PinataError,
    SerializationError,
    ValidationError,
)
from pinata_sdk.models.config import ClientConfig
from pinata_sdk.request import RequestBuilder

__all__ = [
    "Auth", "PinataClient", "ClientConfig", "RequestBuilder", "load_config",
    "PinataError", "ValidationError", "MissingPathParameterError",
    "SerializationError", "NetworkError", "APIError", "DecodeError", "BatchItemError",
]
