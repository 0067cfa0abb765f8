"""Client for the Naver Open API news search endpoint."""

from __future__ import annotations

import logging
import re

import httpx

from ..config import SearchConfig, get_search_credentials
from ..core.dedup import dedup_news_items
from ..core.types import NewsItem
from ..errors import ConfigurationMissingError
from ..fetch.extractor import clean_text

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"<[^>]*>")
MAX_DISPLAY = 100


def strip_tags(text: str) -> str:
    """Drop the <b> highlight tags Naver wraps around matched keywords."""
    return _TAG_RE.sub("", text)


class NaverNewsClient:
    def __init__(
        self,
        cfg: SearchConfig | None = None,
        credentials: tuple[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.cfg = cfg or SearchConfig()
        self.credentials = credentials or get_search_credentials(self.cfg)
        self.transport = transport

    async def search(self, keyword: str, display: int | None = None) -> list[NewsItem]:
        """Search news for a keyword, most relevant first.

        Raises:
            ValueError: When keyword is empty
            ConfigurationMissingError: When Naver credentials are absent
            httpx.HTTPError: When the API request fails
        """
        if not keyword or not keyword.strip():
            raise ValueError("Keyword is required")
        if self.credentials is None:
            raise ConfigurationMissingError("Naver API credentials not configured")
        client_id, client_secret = self.credentials

        count = display if display is not None else self.cfg.display
        params = {
            "query": keyword,
            "display": max(1, min(count, MAX_DISPLAY)),
            "sort": self.cfg.sort,
        }
        headers = {
            "X-Naver-Client-Id": client_id,
            "X-Naver-Client-Secret": client_secret,
        }
        async with httpx.AsyncClient(timeout=30.0, transport=self.transport) as client:
            resp = await client.get(self.cfg.base_url, params=params, headers=headers)
            resp.raise_for_status()
            data = resp.json()

        items = [
            NewsItem(
                title=clean_text(strip_tags(raw.get("title", ""))),
                description=clean_text(strip_tags(raw.get("description", ""))),
                link=raw.get("link", ""),
                pub_date=raw.get("pubDate", ""),
            )
            for raw in data.get("items", [])
        ]
        logger.info("Naver search %r returned %d articles", keyword, len(items))

        if self.cfg.dedup_enabled:
            items = dedup_news_items(items, self.cfg.title_similarity_threshold)
        return items
