"""Shared fixtures for pinata_sdk tests."""

from __future__ import annotations

import pytest
from pytest_metadata.plugin import metadata_key

from pinata_sdk.auth import Auth
from pinata_sdk.client import PinataClient
from pinata_sdk.models.config import ClientConfig

from tests.mocks import MockPinataServer

TEST_JWT = "valid_jwt_token"
TEST_API_KEY = "test_api_key"
TEST_API_SECRET = "test_api_secret"

# Nothing listens here, so connections are refused immediately.
UNREACHABLE_URL = "http://127.0.0.1:1"


def pytest_configure(config):
    """Add client info to the HTML report Environment table."""
    meta = config.stash.setdefault(metadata_key, {})
    meta["API"] = "local aiohttp mock of api.pinata.cloud"


def make_test_config(**overrides) -> ClientConfig:
    """Build a ClientConfig suitable for testing."""
    defaults = dict(
        base_url=UNREACHABLE_URL,
        jwt=TEST_JWT,
        timeout=5.0,
    )
    defaults.update(overrides)
    return ClientConfig(**defaults)


@pytest.fixture
async def mock_server():
    """Running MockPinataServer; routes are registered by each test."""
    server = MockPinataServer()
    await server.start()
    yield server
    await server.stop()


@pytest.fixture
async def client(mock_server):
    """JWT-authenticated PinataClient pointed at the mock server."""
    c = PinataClient(Auth.with_jwt(TEST_JWT), make_test_config(base_url=mock_server.url))
    yield c
    await c.aclose()


@pytest.fixture
async def key_client(mock_server):
    """PinataClient authenticated with an API key/secret pair."""
    c = PinataClient(
        Auth(api_key=TEST_API_KEY, api_secret=TEST_API_SECRET),
        make_test_config(base_url=mock_server.url, jwt=""),
    )
    yield c
    await c.aclose()
