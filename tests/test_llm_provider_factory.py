"""Tests for hot-swappable LLM provider factory."""

import pytest

from econ_feed.config import ProviderConfig
from econ_feed.llm.providers.base import ProviderDisabled
from econ_feed.llm.providers.factory import available_providers, build_provider, create_provider
from econ_feed.llm.providers.gemini import GeminiProvider
from econ_feed.llm.providers.openai_compatible import OpenAICompatibleProvider


def test_available_providers_contains_expected_backends():
    names = available_providers()
    assert "gemini" in names
    assert "openai" in names
    assert "openai_compatible" in names


def test_create_provider_gemini():
    provider = create_provider(
        ProviderConfig(
            name="gemini",
            model="gemini-2.0-flash",
            api_key="test-key",
            base_url="https://generativelanguage.googleapis.com",
        ),
        llm_logger=None,
    )
    assert isinstance(provider, GeminiProvider)


def test_create_provider_openai_compatible():
    provider = create_provider(
        ProviderConfig(
            name="openai",
            model="gpt-4o-mini",
            api_key="test-key",
            base_url="https://api.openai.com/v1",
        ),
        llm_logger=None,
    )
    assert isinstance(provider, OpenAICompatibleProvider)


def test_create_provider_reads_key_from_environment(monkeypatch):
    monkeypatch.setenv("ECON_FEED_TEST_KEY", "env-key")
    provider = create_provider(ProviderConfig(name="openai", api_key_env="ECON_FEED_TEST_KEY"))
    assert provider.api_key == "env-key"


def test_create_provider_rejects_unknown_backend():
    with pytest.raises(ValueError, match="Unsupported provider"):
        create_provider(
            ProviderConfig(
                name="unknown-provider",
                model="x",
                api_key="test-key",
                base_url="https://example.com",
            ),
            llm_logger=None,
        )


def test_create_provider_rejects_missing_key(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    with pytest.raises(ValueError, match="Missing API key"):
        create_provider(ProviderConfig(name="openai"))


def test_build_provider_without_key_is_disabled(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    provider = build_provider(ProviderConfig(name="openai"))
    assert isinstance(provider, ProviderDisabled)
    assert "OPENAI_API_KEY" in provider.reason


def test_build_provider_with_key_is_live():
    provider = build_provider(ProviderConfig(name="gemini", api_key="test-key"))
    assert isinstance(provider, GeminiProvider)
