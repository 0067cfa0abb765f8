"""Exception types raised across the econ_feed pipeline."""

from __future__ import annotations


class EconFeedError(Exception):
    """Base class for econ_feed errors."""


class FetchError(EconFeedError):
    """Transport-level failure while fetching an article page.

    Raised by the fetcher and caught by the scraper, which turns it into a
    failed ScrapedArticle instead of propagating it.
    """

    def __init__(self, url: str, message: str, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ConfigurationMissingError(EconFeedError):
    """Required external credentials are absent for a requested feature."""


class ServiceError(EconFeedError):
    """A boundary operation failed with a message safe to show the user."""
