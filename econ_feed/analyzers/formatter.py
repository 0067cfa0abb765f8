"""Paragraph reformatting of scraped Korean article text."""

from __future__ import annotations

from ..llm.prompts import build_formatting_prompt
from ..logging_utils import log_event
from .base import CachedModelTask


class Formatter(CachedModelTask):
    async def format(self, text: str) -> str:
        """Return the article text broken into readable paragraphs.

        Raises:
            ValueError: When text is empty
            ConfigurationMissingError: When no model provider is configured
            httpx.HTTPError: When the model call fails
        """
        if not text or not text.strip():
            raise ValueError("Text is required")
        provider = self.require_provider()

        cached = await self.cache.get_formatting(text)
        if cached:
            log_event(self.logger, "Using cached formatting", event="formatting_cache_hit")
            return cached

        log_event(self.logger, "Calling model for formatting", event="formatting_request", chars=len(text))
        formatted = await provider.complete(
            build_formatting_prompt(text),
            temperature=0.3,
            max_tokens=2000,
            task="formatting",
        )
        formatted = formatted or text
        await self.cache.set_formatting(text, formatted)
        return formatted
