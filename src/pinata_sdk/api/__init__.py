"""Endpoint groups exposed on PinataClient."""

from pinata_sdk.api.groups import GroupsAPI
from pinata_sdk.api.keys import KeysAPI
from pinata_sdk.api.pinning import PinningAPI
from pinata_sdk.api.signatures import SignaturesAPI
from pinata_sdk.api.swaps import SwapsAPI

__all__ = ["GroupsAPI", "KeysAPI", "PinningAPI", "SignaturesAPI", "SwapsAPI"]
