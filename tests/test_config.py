"""
Tests for configuration loading and the client factory.
"""
import pytest
from unittest.mock import patch

from intervals_mcp import client_factory
from intervals_mcp.config import Config, ConfigError, load_config
from intervals_mcp.sdk.types import API_URL


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "ATHLETE_ID", "API_KEY", "INTERVALS_API_URL", "INTERVALS_TIMEOUT",
        "LOG_LEVEL", "MCP_TRANSPORT", "MCP_HOST", "MCP_PORT",
    ):
        monkeypatch.delenv(name, raising=False)
    # Never pick up a developer's real .env
    with patch("intervals_mcp.config.load_dotenv"):
        yield monkeypatch


def test_load_config_defaults(clean_env):
    clean_env.setenv("ATHLETE_ID", "i42")
    clean_env.setenv("API_KEY", "secret")

    config = load_config()

    assert config.athlete_id == "i42"
    assert config.api_key == "secret"
    assert config.api_url == API_URL
    assert config.timeout == 30.0
    assert config.transport == "stdio"
    assert config.port == 8081


def test_load_config_overrides(clean_env):
    clean_env.setenv("ATHLETE_ID", "i42")
    clean_env.setenv("API_KEY", "secret")
    clean_env.setenv("INTERVALS_TIMEOUT", "5")
    clean_env.setenv("MCP_TRANSPORT", "http")
    clean_env.setenv("MCP_PORT", "9000")
    clean_env.setenv("LOG_LEVEL", "debug")

    config = load_config()

    assert config.timeout == 5.0
    assert config.transport == "http"
    assert config.port == 9000
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize("present", [{}, {"ATHLETE_ID": "i42"}, {"API_KEY": "secret"}, {"ATHLETE_ID": " ", "API_KEY": "secret"}])
def test_missing_credentials(clean_env, present):
    for name, value in present.items():
        clean_env.setenv(name, value)

    with pytest.raises(ConfigError, match="ATHLETE_ID and API_KEY"):
        load_config()


def test_invalid_port(clean_env):
    clean_env.setenv("ATHLETE_ID", "i42")
    clean_env.setenv("API_KEY", "secret")
    clean_env.setenv("MCP_PORT", "eighty")

    with pytest.raises(ConfigError, match="MCP_PORT"):
        load_config()


def test_repr_hides_api_key():
    config = Config(athlete_id="i42", api_key="super-secret")
    assert "super-secret" not in repr(config)


def test_create_client_from_config():
    config = Config(athlete_id="i42", api_key="secret", api_url="http://localhost/api/v1", timeout=3.0)

    client = client_factory.create_client(config)

    assert client.athlete_id == "i42"
    assert client.base_url == "http://localhost/api/v1"
    assert client.timeout == 3.0


def test_get_client_is_cached(clean_env):
    clean_env.setenv("ATHLETE_ID", "i42")
    clean_env.setenv("API_KEY", "secret")
    client_factory.get_client.cache_clear()
    try:
        assert client_factory.get_client() is client_factory.get_client()
    finally:
        client_factory.get_client.cache_clear()


def test_get_client_without_config(clean_env):
    client_factory.get_client.cache_clear()
    with pytest.raises(ConfigError):
        client_factory.get_client()
