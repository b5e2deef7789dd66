"""
Tests for configuration loading and validation.
"""
import pytest

from album_gallery.config import DEFAULT_API_BASE, DEFAULT_ASK_PROVIDERS, GalleryConfig
from album_gallery.config_loader import load_config_from_env
from album_gallery.config_validator import mask_secret, parse_origins
from album_gallery.exceptions import ConfigurationError

ENV_KEYS = [
    "GROQ_API_KEY", "GOOGLE_API_KEY", "PPLX_API_KEY", "OPENAI_API_KEY", "DEEPINFRA_API_KEY",
    "CORS_ORIGINS", "PORT", "HOST", "API_BASE", "ASK_PROVIDERS", "CAPTION_PROVIDERS",
    "REQUEST_TIMEOUT", "CAPTION_TTL_SECONDS", "RATE_LIMIT", "RATE_LIMIT_ENABLED",
]


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestLoadConfig:
    """Tests for load_config_from_env."""

    def test_defaults(self, clean_env):
        config = load_config_from_env(dotenv=False)

        assert config.port == 3000
        assert config.host == "0.0.0.0"
        assert config.cors_origins == []
        assert config.ask_providers == DEFAULT_ASK_PROVIDERS
        assert config.api_base == DEFAULT_API_BASE
        assert not config.has_any_provider()

    def test_reads_keys_and_origins(self, clean_env):
        clean_env.setenv("GROQ_API_KEY", "gsk-live-123")
        clean_env.setenv("GOOGLE_API_KEY", "g-live-456")
        clean_env.setenv("CORS_ORIGINS", "https://a.dev/, https://b.dev")
        clean_env.setenv("PORT", "8080")

        config = load_config_from_env(dotenv=False)

        assert config.api_keys()["groq"] == "gsk-live-123"
        assert config.api_keys()["gemini"] == "g-live-456"
        assert config.cors_origins == ["https://a.dev", "https://b.dev"]
        assert config.port == 8080

    def test_placeholder_key_ignored(self, clean_env):
        clean_env.setenv("OPENAI_API_KEY", "your_openai_key_here")

        with pytest.warns(UserWarning):
            config = load_config_from_env(dotenv=False)

        assert config.openai_api_key is None

    def test_provider_order(self, clean_env):
        clean_env.setenv("ASK_PROVIDERS", "OpenAI, groq")
        assert load_config_from_env(dotenv=False).ask_providers == ["openai", "groq"]

    def test_unknown_provider(self, clean_env):
        clean_env.setenv("CAPTION_PROVIDERS", "openai,claude")
        with pytest.raises(ConfigurationError):
            load_config_from_env(dotenv=False)

    @pytest.mark.parametrize("key,value", [
        ("PORT", "abc"),
        ("REQUEST_TIMEOUT", "0"),
        ("CAPTION_TTL_SECONDS", "-1"),
    ])
    def test_invalid_numbers(self, clean_env, key, value):
        clean_env.setenv(key, value)
        with pytest.raises(ConfigurationError):
            load_config_from_env(dotenv=False)

    def test_api_base_trailing_slash_stripped(self, clean_env):
        clean_env.setenv("API_BASE", "http://localhost:3000/")
        assert load_config_from_env(dotenv=False).api_base == "http://localhost:3000"

    def test_rate_limit_toggle(self, clean_env):
        clean_env.setenv("RATE_LIMIT_ENABLED", "false")
        assert load_config_from_env(dotenv=False).rate_limit_enabled is False


class TestHelpers:
    """Tests for validator helpers."""

    def test_parse_origins(self):
        assert parse_origins(None) == []
        assert parse_origins(" https://x.dev/ ,,") == ["https://x.dev"]

    def test_mask_secret(self):
        assert mask_secret("abcd1234wxyz") == "abcd...wxyz"
        assert mask_secret("short") == "***"
        assert mask_secret(None) == "***"

    def test_gemini_uses_google_key(self):
        assert GalleryConfig(google_api_key="g").api_keys()["gemini"] == "g"
