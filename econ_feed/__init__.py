"""
econ-feed - Korean economic news aggregation with AI curation.

This package searches Korean economic news by keyword, scores each article
for market impact, and extracts, reformats, summarizes and translates
article bodies. Model outputs are cached by a digest of their input text so
repeated requests cost nothing.

Main entry point is the CLI via the `econ-feed` command.

Example:
    $ econ-feed search 환율
"""

__all__ = [
    "__version__",
    "ArticleScraper",
    "NewsFeedService",
    "ResponseCache",
    "build_service",
    "load_config",
]
__version__ = "0.1.0"

from .cache import ResponseCache
from .config import load_config
from .fetch import ArticleScraper
from .service import NewsFeedService, build_service
