"""
Article fetching and extraction.

This package handles HTTP fetching, selector-based content extraction
and the retrying scraper built on both.
"""

from .extractor import clean_text, extract_page
from .fetcher import FetchResult, fetch_page
from .scraper import ArticleScraper

__all__ = [
    "ArticleScraper",
    "FetchResult",
    "clean_text",
    "extract_page",
    "fetch_page",
]
