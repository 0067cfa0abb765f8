"""Provider factory and registry for hot-swappable LLM backends."""

from __future__ import annotations

import logging

import httpx

from ...config import ProviderConfig, get_api_key
from .base import LLMProvider, ProviderDisabled
from .gemini import GeminiProvider
from .openai_compatible import OpenAICompatibleProvider


ProviderBuilder = type[LLMProvider]

_PROVIDER_REGISTRY: dict[str, ProviderBuilder] = {
    "gemini": GeminiProvider,
    "openai": OpenAICompatibleProvider,
    "openai_compatible": OpenAICompatibleProvider,
    "openai-compatible": OpenAICompatibleProvider,
}


def available_providers() -> list[str]:
    """Return the set of registered provider names."""
    return sorted(_PROVIDER_REGISTRY.keys())


def create_provider(
    provider_cfg: ProviderConfig,
    llm_logger: logging.Logger | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> LLMProvider:
    """Build a provider instance from runtime config.

    Raises:
        ValueError: For an unknown provider name or a missing API key
    """
    name = provider_cfg.name.lower().strip()
    builder = _PROVIDER_REGISTRY.get(name)
    if builder is None:
        supported = ", ".join(available_providers())
        raise ValueError(f"Unsupported provider: {provider_cfg.name}. Supported: {supported}")
    api_key = get_api_key(provider_cfg)
    return builder(provider_cfg, api_key, llm_logger, transport=transport)


def build_provider(
    provider_cfg: ProviderConfig,
    llm_logger: logging.Logger | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> LLMProvider | ProviderDisabled:
    """Like create_provider, but a missing API key yields ProviderDisabled.

    An unsupported provider name is a configuration mistake and still raises.
    """
    if not get_api_key(provider_cfg):
        return ProviderDisabled(
            f"{provider_cfg.name} API key not configured (set {provider_cfg.api_key_env})"
        )
    return create_provider(provider_cfg, llm_logger, transport=transport)
