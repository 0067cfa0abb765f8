"""
Core data types for the econ_feed pipeline.

This module defines the data structures passed between stages:
- NewsItem: A search hit from the news search API
- ScrapedArticle: Result of extracting one article page
- CurationResult: AI-assigned importance score, category, urgency and topics
- CuratedArticle: A NewsItem joined with its CurationResult
- CurationBatch / FeedResult: Aggregates returned to callers
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Category(str, Enum):
    MONETARY = "monetary"
    MARKETS = "markets"
    CURRENCY = "currency"
    REALESTATE = "realestate"
    TRADE = "trade"
    CORPORATE = "corporate"
    BANKING = "banking"
    POLICY = "policy"
    INTERNATIONAL = "international"
    OTHER = "other"

    @classmethod
    def parse(cls, value: Any) -> "Category":
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.OTHER


class Urgency(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    BREAKING = "breaking"

    @classmethod
    def parse(cls, value: Any) -> "Urgency":
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.MEDIUM


@dataclass
class NewsItem:
    """A single hit returned by the news search API.

    Attributes:
        title: Headline with HTML tags stripped
        description: Snippet with HTML tags stripped
        link: URL of the article
        pub_date: Publication date string as returned by the API
    """

    title: str
    description: str
    link: str
    pub_date: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "link": self.link,
            "pubDate": self.pub_date,
        }


@dataclass
class ScrapedArticle:
    """Result of a single scrape attempt.

    content is empty whenever success is False; error then explains why.
    published_date and author are free text exactly as the site shows them.
    """

    title: str
    content: str
    success: bool
    published_date: str | None = None
    author: str | None = None
    error: str | None = None

    @property
    def word_count(self) -> int:
        return len(self.content.split())

    @classmethod
    def failure(cls, error: str, title: str = "Scraping failed") -> "ScrapedArticle":
        return cls(title=title, content="", success=False, error=error)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "content": self.content,
            "publishedDate": self.published_date,
            "author": self.author,
            "wordCount": self.word_count,
        }


@dataclass
class CurationResult:
    """Market-impact assessment of one article."""

    score: float
    reason: str
    category: Category = Category.OTHER
    urgency: Urgency = Urgency.MEDIUM
    topics: list[str] = field(default_factory=list)

    @classmethod
    def default(cls, reason: str = "Analysis parsing failed") -> "CurationResult":
        return cls(score=5, reason=reason)

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "reason": self.reason,
            "category": self.category.value,
            "urgency": self.urgency.value,
            "topics": list(self.topics),
        }


@dataclass
class CuratedArticle:
    item: NewsItem
    curation: CurationResult

    @property
    def importance_score(self) -> float:
        return self.curation.score

    def to_dict(self) -> dict[str, Any]:
        data = self.item.to_dict()
        data.update(
            {
                "importanceScore": self.curation.score,
                "importanceReason": self.curation.reason,
                "category": self.curation.category.value,
                "urgency": self.curation.urgency.value,
                "topics": list(self.curation.topics),
            }
        )
        return data


@dataclass
class CurationBatch:
    """Curated articles sorted by score, highest first."""

    articles: list[CuratedArticle]
    total_curated: int
    average_score: float


@dataclass
class FeedResult:
    keyword: str
    total_articles: int
    articles: list[CuratedArticle]
    average_importance: float | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "keyword": self.keyword,
            "totalArticles": self.total_articles,
            "articles": [article.to_dict() for article in self.articles],
        }
        if self.average_importance is not None:
            data["averageImportance"] = self.average_importance
        return data
