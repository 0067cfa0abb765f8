"""
Search result deduplication using URL matching and fuzzy title comparison.

Korean portals syndicate the same wire story (Yonhap, Newsis) under many
outlets, so a keyword search often returns several near-identical headlines.
"""

from __future__ import annotations

from rapidfuzz import fuzz

from .types import NewsItem


def dedup_news_items(items: list[NewsItem], threshold: int = 92) -> list[NewsItem]:
    """Remove duplicate search hits, preserving original order.

    Args:
        items: Search hits in ranking order
        threshold: Similarity threshold (0-100) for fuzzy title matching

    Returns:
        The first occurrence of each distinct link/title
    """
    seen_links: set[str] = set()
    kept: list[NewsItem] = []
    titles: list[str] = []

    for item in items:
        if item.link in seen_links:
            continue
        if _is_similar_title(item.title, titles, threshold):
            continue
        seen_links.add(item.link)
        titles.append(item.title)
        kept.append(item)

    return kept


def _is_similar_title(title: str, titles: list[str], threshold: int) -> bool:
    for existing in titles:
        if fuzz.ratio(title, existing) >= threshold:
            return True
    return False
