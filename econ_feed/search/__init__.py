"""News search providers."""

from .naver import NaverNewsClient, strip_tags

__all__ = ["NaverNewsClient", "strip_tags"]
