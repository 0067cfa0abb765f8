"""Article scraper: fetch + extract with linear-backoff retries."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

import httpx

from ..config import FetchConfig
from ..core.types import ScrapedArticle
from ..errors import FetchError
from ..logging_utils import log_event
from .extractor import extract_page
from .fetcher import fetch_page

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]

EMPTY_CONTENT_ERROR = "Could not extract article content"


class ArticleScraper:
    """Turns article URLs into ScrapedArticle results.

    Failures of any kind (network, parsing, empty body) are reported as a
    ScrapedArticle with success=False; nothing is raised to the caller.
    """

    def __init__(
        self,
        cfg: FetchConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self.cfg = cfg or FetchConfig()
        self.transport = transport
        self._sleep = sleep

    async def extract(self, url: str) -> ScrapedArticle:
        log_event(logger, "Scraping article", event="scrape_start", url=url)
        try:
            page = await fetch_page(url, self.cfg, transport=self.transport)
            extracted = extract_page(
                page.text,
                min_chars=self.cfg.min_content_chars,
                library_fallback=self.cfg.library_fallback,
            )
        except FetchError as exc:
            logger.warning("Fetch failed for %s: %s", url, exc)
            return ScrapedArticle.failure(str(exc))
        except Exception as exc:  # noqa: BLE001
            logger.warning("Scraping error for %s: %s", url, exc)
            return ScrapedArticle.failure(str(exc) or "Unknown scraping error")

        if not extracted.content:
            return ScrapedArticle(
                title=extracted.title,
                content="",
                success=False,
                error=EMPTY_CONTENT_ERROR,
            )

        return ScrapedArticle(
            title=extracted.title,
            content=extracted.content,
            success=True,
            published_date=extracted.published_date,
            author=extracted.author,
        )

    async def extract_with_retry(self, url: str, max_retries: int | None = None) -> ScrapedArticle:
        """Scrape with up to max_retries extra attempts.

        Waits backoff_seconds * attempt between attempts (1s, 2s, ... by
        default). Attempts are strictly sequential. A page that loads but
        yields no body is returned at once; its structure will not change.
        """
        retries = self.cfg.retries if max_retries is None else max_retries
        for attempt in range(retries + 1):
            result = await self.extract(url)
            if result.success or result.error == EMPTY_CONTENT_ERROR:
                return result
            if attempt == retries:
                log_event(
                    logger,
                    "Scraping gave up",
                    event="scrape_failed",
                    url=url,
                    attempts=attempt + 1,
                    error=result.error,
                )
                return result
            await self._sleep(self.cfg.backoff_seconds * (attempt + 1))

        return ScrapedArticle.failure("Max retries exceeded")
