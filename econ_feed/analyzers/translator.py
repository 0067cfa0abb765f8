"""Korean to English translation of headlines, snippets and articles."""

from __future__ import annotations

from ..llm.prompts import build_translation_prompt, is_long_text
from ..logging_utils import log_event
from .base import CachedModelTask


class Translator(CachedModelTask):
    async def translate(self, text: str) -> str:
        """Translate text to English, reformatting full articles into paragraphs.

        Raises:
            ValueError: When text is empty
            ConfigurationMissingError: When no model provider is configured
            httpx.HTTPError: When the model call fails
        """
        if not text or not text.strip():
            raise ValueError("Text is required")
        provider = self.require_provider()

        cached = await self.cache.get_translation(text)
        if cached:
            log_event(self.logger, "Using cached translation", event="translation_cache_hit")
            return cached

        full_article = is_long_text(text)
        log_event(
            self.logger,
            "Calling model for translation",
            event="translation_request",
            full_article=full_article,
        )
        translation = await provider.complete(
            build_translation_prompt(text),
            temperature=0.3,
            max_tokens=4000 if full_article else 1000,
            task="translation",
        )
        translation = translation or text
        await self.cache.set_translation(text, translation)
        return translation
