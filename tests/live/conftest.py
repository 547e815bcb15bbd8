"""Live fixtures: talk to the real Pinata API.

Every test here is skipped unless PINATA_JWT is set in the environment.
"""

from __future__ import annotations

import os

import pytest

from pinata_sdk.client import PinataClient
from pinata_sdk.config import load_config


@pytest.fixture
def live_config():
    """Gate: skip unless real credentials are available."""
    if not os.environ.get("PINATA_JWT"):
        pytest.skip("PINATA_JWT not set")
    return load_config()


@pytest.fixture
async def live_client(live_config):
    async with PinataClient.from_config(live_config) as c:
        yield c
