"""
Tests for configuration loading.
"""

import pytest
from pydantic import ValidationError

from perplexity_mcp.config.settings import MAX_TOKENS, TEMPERATURE, ServerConfig, Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("PERPLEXITY_API_KEY", "PERPLEXITY_MODEL", "PORT", "MCP_TRANSPORT"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.perplexity_api_key == ""
        assert settings.perplexity_model == "sonar-pro"
        assert settings.perplexity_api_url == "https://api.perplexity.ai/chat/completions"
        assert settings.mcp_transport == "stdio"
        assert settings.port == 3001

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PERPLEXITY_API_KEY", "pplx-123")
        monkeypatch.setenv("PERPLEXITY_MODEL", "sonar")
        monkeypatch.setenv("PORT", "4000")

        settings = Settings(_env_file=None)

        assert settings.perplexity_api_key == "pplx-123"
        assert settings.perplexity_model == "sonar"
        assert settings.port == 4000

    def test_invalid_model_in_environment(self, monkeypatch):
        monkeypatch.setenv("PERPLEXITY_MODEL", "gpt-4")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestServerConfig:
    def test_fixed_generation_parameters(self):
        config = ServerConfig(model="sonar")
        assert config.max_tokens == MAX_TOKENS == 8192
        assert config.temperature == TEMPERATURE == 0.2

    @pytest.mark.parametrize("model", ["foo", "", "sonar-reasoning"])
    def test_rejects_unknown_model(self, model):
        with pytest.raises(ValidationError):
            ServerConfig(model=model)

    def test_is_immutable(self):
        config = ServerConfig(model="sonar")
        with pytest.raises(ValidationError):
            config.model = "sonar-pro"

    def test_from_settings_prefers_explicit_model(self):
        settings = Settings(
            _env_file=None,
            perplexity_api_key="k",
            perplexity_model="sonar-pro",
            perplexity_timeout=12.5,
        )

        config = ServerConfig.from_settings(settings, model="sonar")

        assert config.model == "sonar"
        assert config.api_key == "k"
        assert config.timeout == 12.5

    def test_from_settings_falls_back_to_settings_model(self):
        settings = Settings(_env_file=None, perplexity_model="sonar")
        assert ServerConfig.from_settings(settings).model == "sonar"


class TestChoices:
    def test_cli_choices_follow_the_literal_types(self):
        from perplexity_mcp.config.settings import PERPLEXITY_MODELS, TRANSPORT_TYPES

        assert PERPLEXITY_MODELS == ("sonar", "sonar-pro")
        assert TRANSPORT_TYPES == ("stdio", "sse")
