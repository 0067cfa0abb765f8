"""Importance curation of search results."""

from __future__ import annotations

import asyncio

from ..core.types import CuratedArticle, CurationBatch, CurationResult, NewsItem
from ..llm.parsing import curation_from_cache, parse_curation
from ..llm.prompts import build_curation_prompt
from ..logging_utils import log_event
from .base import CachedModelTask


CURATION_TEMPERATURE = 0.3
CURATION_MAX_TOKENS = 300
EMPTY_REPLY_FALLBACK = (
    '{"score": 5, "reason": "Analysis failed", "category": "other", '
    '"urgency": "medium", "topics": []}'
)


def curation_key(item: NewsItem) -> str:
    return f"{item.title} {item.description}"


class Curator(CachedModelTask):
    """Scores articles for market impact, one model call per uncached article."""

    async def curate_article(self, item: NewsItem) -> CuratedArticle:
        """Curate one article; never raises.

        Any failure (provider error, cache trouble) degrades to a neutral
        result, so one bad article cannot sink a batch.
        """
        key = curation_key(item)
        try:
            cached = await self.cache.get_curation(key)
            if cached is not None:
                curation = curation_from_cache(cached)
                if curation is not None:
                    log_event(self.logger, "Using cached curation", event="curation_cache_hit", title=item.title)
                    return CuratedArticle(item=item, curation=curation)

            provider = self.require_provider()
            log_event(self.logger, "Calling model for curation", event="curation_request", title=item.title)
            content = await provider.complete(
                build_curation_prompt(item.title, item.description),
                temperature=CURATION_TEMPERATURE,
                max_tokens=CURATION_MAX_TOKENS,
                json_mode=True,
                task="curation",
            )
            curation = parse_curation(content or EMPTY_REPLY_FALLBACK)
            await self.cache.set_curation(key, curation.to_dict())
            return CuratedArticle(item=item, curation=curation)
        except Exception as exc:  # noqa: BLE001
            self.logger.error("Error curating article %r: %s", item.title, exc)
            return CuratedArticle(item=item, curation=CurationResult.default("Curation analysis failed"))

    async def curate_batch(self, items: list[NewsItem]) -> CurationBatch:
        """Curate all items concurrently and sort by score, highest first.

        Ties keep their input order.

        Raises:
            ConfigurationMissingError: When no model provider is configured
        """
        self.require_provider()
        curated = await asyncio.gather(*(self.curate_article(item) for item in items))
        ranked = sorted(curated, key=lambda article: article.importance_score, reverse=True)
        average = sum(a.importance_score for a in ranked) / len(ranked) if ranked else 0.0
        return CurationBatch(articles=ranked, total_curated=len(ranked), average_score=average)
