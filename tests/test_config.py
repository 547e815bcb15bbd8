"""Configuration loading from TOML and environment."""

from __future__ import annotations

import pytest

from pinata_sdk.config import load_config
from pinata_sdk.models.config import DEFAULT_BASE_URL

ENV_VARS = ("PINATA_JWT", "PINATA_API_KEY", "PINATA_API_SECRET", "PINATA_BASE_URL", "PINATA_TIMEOUT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_file():
    cfg = load_config()
    assert cfg.base_url == DEFAULT_BASE_URL
    assert cfg.timeout == 30.0
    assert cfg.max_workers == 5
    assert not cfg.has_credentials()


def test_missing_file_falls_back_to_defaults(tmp_path):
    cfg = load_config(tmp_path / "absent.toml")
    assert cfg.base_url == DEFAULT_BASE_URL


def test_toml_sections(tmp_path):
    path = tmp_path / "pinata.toml"
    path.write_text(
        '[api]\n'
        'base_url = "http://localhost:8080"\n'
        'max_workers = 3\n'
        'log_level = "debug"\n'
        '\n'
        '[auth]\n'
        'api_key = "key"\n'
        'api_secret = "secret"\n'
        '\n'
        '[http]\n'
        'timeout = 90\n'
        'max_connections = 20\n'
        'keepalive_expiry = 15\n'
    )

    cfg = load_config(path)

    assert cfg.base_url == "http://localhost:8080"
    assert cfg.max_workers == 3
    assert cfg.log_level == "debug"
    assert (cfg.api_key, cfg.api_secret) == ("key", "secret")
    assert cfg.timeout == 90.0
    assert cfg.max_connections == 20
    assert cfg.keepalive_expiry == 15.0
    assert cfg.has_credentials()
    assert cfg.auth().api_key == "key"


def test_env_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "pinata.toml"
    path.write_text('[auth]\njwt = "from-file"\n[http]\ntimeout = 90\n')
    monkeypatch.setenv("PINATA_JWT", "from-env")
    monkeypatch.setenv("PINATA_BASE_URL", "http://env.example")
    monkeypatch.setenv("PINATA_TIMEOUT", "12.5")

    cfg = load_config(path)

    assert cfg.jwt == "from-env"
    assert cfg.base_url == "http://env.example"
    assert cfg.timeout == 12.5


def test_custom_env_prefix(monkeypatch):
    monkeypatch.setenv("MYAPP_JWT", "token")
    assert load_config(env_prefix="MYAPP_").jwt == "token"


def test_key_without_secret_is_not_credentials(monkeypatch):
    monkeypatch.setenv("PINATA_API_KEY", "key")
    assert not load_config().has_credentials()
