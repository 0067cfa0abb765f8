"""
Feed orchestration.

NewsFeedService is the boundary the CLI (or any other front end) talks to.
It wires search, scraping, caching and the model-backed tasks together and
translates their failures into ConfigurationMissingError / ServiceError.
Collaborators are constructed once by build_service and injected.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
import logging
from typing import Any
from urllib.parse import urlparse

import httpx

from .analyzers import Curator, Formatter, Summarizer, Translator
from .cache import ResponseCache, build_store
from .config import AppConfig
from .core.types import CuratedArticle, CurationResult, FeedResult, NewsItem, ScrapedArticle
from .errors import ServiceError
from .fetch.scraper import ArticleScraper
from .llm.providers import LLMProvider, ProviderDisabled, build_provider
from .logging_utils import log_event
from .search import NaverNewsClient

logger = logging.getLogger(__name__)

CURATION_UNAVAILABLE = "큐레이션 사용 불가"


@dataclass
class ArticleReading:
    """A scraped article with its reader-facing derivatives."""

    article: ScrapedArticle
    formatted: str
    summary: str | None = None
    translation: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data = self.article.to_dict()
        data.update(
            {
                "formattedContent": self.formatted,
                "summary": self.summary,
                "translation": self.translation,
            }
        )
        return data


class NewsFeedService:
    def __init__(
        self,
        scraper: ArticleScraper,
        search_client: NaverNewsClient,
        curator: Curator,
        formatter: Formatter,
        translator: Translator,
        summarizer: Summarizer,
    ) -> None:
        self.scraper = scraper
        self.search_client = search_client
        self.curator = curator
        self.formatter = formatter
        self.translator = translator
        self.summarizer = summarizer

    async def search(self, keyword: str, display: int | None = None) -> FeedResult:
        """Search news and rank the hits by curated market impact.

        When curation cannot run at all the articles are returned in search
        order with neutral scores.
        """
        try:
            items = await self.search_client.search(keyword, display)
        except httpx.HTTPError as exc:
            logger.error("Error searching news for %r: %s", keyword, exc)
            raise ServiceError("Failed to search news") from exc

        if self.curator.enabled:
            try:
                batch = await self.curator.curate_batch(items)
            except Exception as exc:  # noqa: BLE001
                logger.error("Curation failed for %r: %s", keyword, exc)
            else:
                log_event(
                    logger,
                    "Search curated",
                    event="search_curated",
                    keyword=keyword,
                    total=batch.total_curated,
                    average_score=batch.average_score,
                )
                return FeedResult(
                    keyword=keyword,
                    total_articles=batch.total_curated,
                    articles=batch.articles,
                    average_importance=batch.average_score,
                )

        return FeedResult(
            keyword=keyword,
            total_articles=len(items),
            articles=[_uncurated(item) for item in items],
        )

    async def scrape(self, url: str) -> ScrapedArticle:
        """Scrape an article page, retrying transient failures.

        Raises:
            ValueError: When url is not an absolute http(s) URL
            ServiceError: When no content could be extracted
        """
        validate_url(url)
        result = await self.scraper.extract_with_retry(url)
        if not result.success:
            raise ServiceError(result.error or "Failed to scrape article")
        return result

    async def format_content(self, text: str) -> str:
        try:
            return await self.formatter.format(text)
        except httpx.HTTPError as exc:
            logger.error("Error formatting content: %s", exc)
            raise ServiceError("Failed to format content") from exc

    async def translate(self, text: str) -> str:
        try:
            return await self.translator.translate(text)
        except httpx.HTTPError as exc:
            logger.error("Error translating text: %s", exc)
            raise ServiceError("Failed to translate text") from exc

    async def summarize(self, title: str, description: str, content: str | None = None) -> str:
        try:
            return await self.summarizer.summarize(title, description, content)
        except httpx.HTTPError as exc:
            logger.error("Error summarizing article: %s", exc)
            raise ServiceError("Failed to summarize article") from exc

    async def read_article(
        self,
        url: str,
        description: str = "",
        translate: bool = True,
        summarize: bool = True,
    ) -> ArticleReading:
        """Scrape, reformat, then summarize and translate concurrently."""
        article = await self.scrape(url)
        formatted = await self.format_content(article.content)

        summary_task = (
            self.summarize(article.title, description, formatted) if summarize else _none()
        )
        translation_task = self.translate(formatted) if translate else _none()
        summary, translation = await asyncio.gather(summary_task, translation_task)
        return ArticleReading(
            article=article,
            formatted=formatted,
            summary=summary,
            translation=translation,
        )


def validate_url(url: str) -> None:
    if not url:
        raise ValueError("URL is required")
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("Invalid URL format")


def build_service(
    cfg: AppConfig,
    llm_logger: logging.Logger | None = None,
    provider: LLMProvider | ProviderDisabled | None = None,
) -> NewsFeedService:
    """Construct the service and all collaborators from config."""
    if provider is None:
        provider = build_provider(cfg.provider, llm_logger)
    if isinstance(provider, ProviderDisabled):
        logger.warning("AI features disabled: %s", provider.reason)

    cache = ResponseCache(build_store(cfg.cache))
    return NewsFeedService(
        scraper=ArticleScraper(cfg.fetch),
        search_client=NaverNewsClient(cfg.search),
        curator=Curator(provider, cache),
        formatter=Formatter(provider, cache),
        translator=Translator(provider, cache),
        summarizer=Summarizer(provider, cache),
    )


def _uncurated(item: NewsItem) -> CuratedArticle:
    return CuratedArticle(item=item, curation=CurationResult.default(CURATION_UNAVAILABLE))


async def _none() -> None:
    return None
