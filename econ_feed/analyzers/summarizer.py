"""Korean-language summaries of articles."""

from __future__ import annotations

from ..llm.prompts import build_summary_prompt, is_long_text
from ..logging_utils import log_event
from .base import CachedModelTask


NO_SUMMARY = "요약을 생성할 수 없습니다."


def summary_source(title: str, description: str, content: str | None = None) -> str:
    """Text the summary is computed from, and cached under."""
    return content or f"{title} {description}"


class Summarizer(CachedModelTask):
    async def summarize(self, title: str, description: str, content: str | None = None) -> str:
        """Summarize in 3-5 sentences for full articles, 2-3 for headlines.

        Raises:
            ValueError: When both title and description are empty
            ConfigurationMissingError: When no model provider is configured
            httpx.HTTPError: When the model call fails
        """
        if not title and not description:
            raise ValueError("Title or description is required")
        provider = self.require_provider()

        text = summary_source(title, description, content)
        cached = await self.cache.get_summary(text)
        if cached:
            log_event(self.logger, "Using cached summary", event="summary_cache_hit")
            return cached

        full_article = is_long_text(text)
        log_event(self.logger, "Calling model for summary", event="summary_request", full_article=full_article)
        summary = await provider.complete(
            build_summary_prompt(text, title=title, description=description),
            temperature=0.3,
            max_tokens=500 if full_article else 200,
            task="summary",
        )
        summary = summary or NO_SUMMARY
        await self.cache.set_summary(text, summary)
        return summary
