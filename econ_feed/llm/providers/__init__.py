from .base import LLMProvider, ProviderDisabled
from .factory import available_providers, build_provider, create_provider
from .gemini import GeminiProvider
from .openai_compatible import OpenAICompatibleProvider

__all__ = [
    "GeminiProvider",
    "LLMProvider",
    "OpenAICompatibleProvider",
    "ProviderDisabled",
    "available_providers",
    "build_provider",
    "create_provider",
]
