"""LLM providers, prompts and output parsing."""

from .parsing import parse_curation, strip_code_fences
from .providers import (
    GeminiProvider,
    LLMProvider,
    OpenAICompatibleProvider,
    ProviderDisabled,
    available_providers,
    build_provider,
    create_provider,
)

__all__ = [
    "GeminiProvider",
    "LLMProvider",
    "OpenAICompatibleProvider",
    "ProviderDisabled",
    "available_providers",
    "build_provider",
    "create_provider",
    "parse_curation",
    "strip_code_fences",
]
