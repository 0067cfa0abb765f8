"""Shared plumbing for cache-first model tasks."""

from __future__ import annotations

import logging

from ..cache.response_cache import ResponseCache
from ..errors import ConfigurationMissingError
from ..llm.providers.base import LLMProvider, ProviderDisabled


class CachedModelTask:
    """Base for tasks that consult the response cache before the model.

    Holds either a live provider or a ProviderDisabled marker; the marker
    turns into ConfigurationMissingError the first time a task needs the
    model.
    """

    def __init__(
        self,
        provider: LLMProvider | ProviderDisabled,
        cache: ResponseCache,
        logger: logging.Logger | None = None,
    ) -> None:
        self.provider = provider
        self.cache = cache
        self.logger = logger or logging.getLogger(type(self).__module__)

    @property
    def enabled(self) -> bool:
        return isinstance(self.provider, LLMProvider)

    def require_provider(self) -> LLMProvider:
        if isinstance(self.provider, ProviderDisabled):
            raise ConfigurationMissingError(self.provider.reason)
        return self.provider
