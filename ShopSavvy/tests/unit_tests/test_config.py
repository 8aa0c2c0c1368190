"""
Tests for client configuration: API key validation, defaults and environment loading
"""

import pytest

from ShopSavvy import __version__
from ShopSavvy.clients.exceptions import ConfigurationError
from ShopSavvy.clients.shopsavvy_client import ShopSavvyClient
from ShopSavvy.config.shopsavvy import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    ENDPOINTS,
    ENV_API_KEY,
    ENV_BASE_URL,
    ENV_TIMEOUT,
    SHOPSAVVY_CONFIG,
    USER_AGENT,
    load_settings_from_env,
    validate_api_key,
)


class TestApiKeyValidation:
    """Keys must be non-empty and carry a live or test prefix"""

    @pytest.mark.parametrize("api_key", [
        "ss_live_abc123",
        "ss_test_valid_key_12345",
        "ss_live_",
    ])
    def test_valid_keys(self, api_key):
        assert validate_api_key(api_key) == api_key

    @pytest.mark.parametrize("api_key", [
        "",
        "   ",
        "\n\t",
        None,
        "invalid_key",
        "SS_LIVE_abc123",
        "sk_live_abc123",
        " ss_live_abc123",
        "ss_prod_abc123",
    ])
    def test_invalid_keys(self, api_key):
        with pytest.raises(ConfigurationError):
            validate_api_key(api_key)

    def test_empty_key_message(self):
        with pytest.raises(ConfigurationError, match="API key is required"):
            validate_api_key("  ")

    def test_malformed_key_message(self):
        with pytest.raises(ConfigurationError, match="ss_live_ or ss_test_"):
            validate_api_key("invalid_key")


class TestClientConstruction:
    """Construction fails immediately on invalid configuration"""

    def test_client_initialization(self, api_key):
        client = ShopSavvyClient(api_key=api_key)

        assert client.api_key == api_key
        assert client.base_url == DEFAULT_BASE_URL
        assert client.timeout == DEFAULT_TIMEOUT
        assert client.endpoints == ENDPOINTS["current"]

    def test_custom_base_url_and_timeout(self, api_key):
        client = ShopSavvyClient(api_key=api_key, base_url="https://example.com/api/", timeout=5)

        assert client.base_url == "https://example.com/api"
        assert client.timeout == 5

    @pytest.mark.parametrize("api_key", ["", "invalid_key", "  "])
    def test_invalid_key_aborts_construction(self, api_key):
        with pytest.raises(ConfigurationError):
            ShopSavvyClient(api_key=api_key)

    def test_invalid_base_url(self, api_key):
        with pytest.raises(ConfigurationError, match="http:// or https://"):
            ShopSavvyClient(api_key=api_key, base_url="ftp://api.shopsavvy.com")

    @pytest.mark.parametrize("timeout", [0, -1])
    def test_invalid_timeout(self, api_key, timeout):
        with pytest.raises(ConfigurationError, match="Timeout must be positive"):
            ShopSavvyClient(api_key=api_key, timeout=timeout)

    def test_default_headers(self, api_key):
        client = ShopSavvyClient(api_key=api_key)
        headers = client._merge_headers()

        assert headers["Authorization"] == f"Bearer {api_key}"
        assert headers["Content-Type"] == "application/json"
        assert headers["User-Agent"] == USER_AGENT == f"ShopSavvy-Python-SDK/{__version__}"

    def test_custom_headers_are_merged(self, api_key):
        client = ShopSavvyClient(api_key=api_key, custom_headers={"X-Trace": "abc"})
        headers = client._merge_headers()

        assert headers["X-Trace"] == "abc"
        assert headers["User-Agent"] == USER_AGENT

    @pytest.mark.parametrize("overrides", [
        {"Authorization": "Bearer someone-else", "User-Agent": "curl/8.0", "Content-Type": "text/plain"},
        {"authorization": "Bearer someone-else", "user-agent": "curl/8.0", "content-type": "text/plain"},
    ])
    def test_custom_headers_cannot_replace_fixed_headers(self, api_key, overrides):
        client = ShopSavvyClient(api_key=api_key, custom_headers=dict(overrides, **{"X-Trace": "abc"}))
        headers = client._merge_headers({"User-Agent": "per-call"})

        assert headers == {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
            "X-Trace": "abc",
        }

    @pytest.mark.asyncio
    async def test_async_context_manager(self, api_key):
        async with ShopSavvyClient(api_key=api_key) as client:
            assert isinstance(client, ShopSavvyClient)


class TestEnvironmentSettings:
    """Settings can come from SHOPSAVVY_* environment variables"""

    def test_load_from_env(self, monkeypatch):
        monkeypatch.setenv(ENV_API_KEY, "ss_live_from_env")
        monkeypatch.setenv(ENV_BASE_URL, "https://staging.shopsavvy.test/v1")
        monkeypatch.setenv(ENV_TIMEOUT, "12.5")

        settings = load_settings_from_env()

        assert settings.api_key == "ss_live_from_env"
        assert settings.base_url == "https://staging.shopsavvy.test/v1"
        assert settings.timeout == 12.5

    def test_defaults_when_only_key_is_set(self, monkeypatch):
        monkeypatch.setenv(ENV_API_KEY, "ss_test_from_env")
        monkeypatch.delenv(ENV_BASE_URL, raising=False)
        monkeypatch.delenv(ENV_TIMEOUT, raising=False)

        settings = load_settings_from_env()

        assert settings.base_url == DEFAULT_BASE_URL == SHOPSAVVY_CONFIG["base_url"]
        assert settings.timeout == DEFAULT_TIMEOUT == SHOPSAVVY_CONFIG["timeout_seconds"]

    def test_invalid_timeout_in_env(self, monkeypatch):
        monkeypatch.setenv(ENV_API_KEY, "ss_test_from_env")
        monkeypatch.setenv(ENV_TIMEOUT, "soon")

        with pytest.raises(ConfigurationError, match=ENV_TIMEOUT):
            load_settings_from_env()

    def test_malformed_key_in_env(self, monkeypatch):
        monkeypatch.setenv(ENV_API_KEY, "not-a-shopsavvy-key")

        with pytest.raises(ConfigurationError):
            load_settings_from_env()

    def test_client_from_env(self, monkeypatch):
        monkeypatch.setenv(ENV_API_KEY, "ss_live_from_env")
        monkeypatch.setenv(ENV_TIMEOUT, "7")
        monkeypatch.delenv(ENV_BASE_URL, raising=False)

        client = ShopSavvyClient.from_env()

        assert client.api_key == "ss_live_from_env"
        assert client.timeout == 7.0
        assert client.base_url == DEFAULT_BASE_URL
