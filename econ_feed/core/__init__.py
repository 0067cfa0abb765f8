"""
Core data types and helpers.

Shared types used across fetching, caching and enrichment.
"""

from .dedup import dedup_news_items
from .types import (
    Category,
    CuratedArticle,
    CurationBatch,
    CurationResult,
    FeedResult,
    NewsItem,
    ScrapedArticle,
    Urgency,
)

__all__ = [
    "Category",
    "CuratedArticle",
    "CurationBatch",
    "CurationResult",
    "FeedResult",
    "NewsItem",
    "ScrapedArticle",
    "Urgency",
    "dedup_news_items",
]
