"""Protocol interfaces for pluggable pinata_sdk components."""

from pinata_sdk.interfaces.auth import Authenticator
from pinata_sdk.interfaces.decoder import ErrorDecoder

__all__ = ["Authenticator", "ErrorDecoder"]
