"""
HTML content extraction tuned for Korean news sites.

Extraction is best-effort and selector-driven:
1. Known portal layouts (Naver, Daum)
2. Generic article containers
3. Generic main/content containers
4. All paragraph text on the page
5. Optional library extractors (trafilatura, readability)

Every stage returns plain text; an empty string means "nothing usable".
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Callable

from bs4 import BeautifulSoup
import trafilatura
from readability import Document


TITLE_SELECTOR = "h1, .headline, .title, .news-headline, .article-headline"
DATE_SELECTOR = "time, .date, .publish-date, .article-date"
AUTHOR_SELECTOR = ".author, .byline, .writer"
NO_TITLE = "No title found"

CONTENT_SELECTORS: list[str] = [
    # Naver news; the summary subtitle comes first so it leads the body
    ".media_end_summary.subtitle, #dic_area, .go_trans._article_content, ._article_content",
    # Daum news
    ".news_view .article_view, .news_article .article_view",
    "article, .article, .news-article, .post-content, .entry-content",
    ".content, .main-content, .article-content, .news-content",
    "main, #main, .main, #content, .post, .story",
]

NOISE_SELECTOR = "script, style, .ad, .advertisement, .related, .comment, .end_photo_org"
PHOTO_CAPTION_SELECTOR = "p .end_photo_org"

_ENTITIES = [
    ("&quot;", '"'),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&nbsp;", " "),
    ("&#39;", "'"),
    ("&apos;", "'"),
]
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass
class ExtractedPage:
    title: str
    content: str
    published_date: str | None = None
    author: str | None = None


def clean_text(text: str) -> str:
    """Decode leftover HTML entities and normalise whitespace.

    Runs of whitespace become a single space, or a single newline when the
    run contains a line break.

    Examples:
        >>> clean_text("  A&amp;B \\n\\n\\n C  ")
        'A&B\\nC'
    """
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    text = _WHITESPACE_RE.sub(_collapse_whitespace, text)
    return text.strip()


def _collapse_whitespace(match: re.Match[str]) -> str:
    return "\n" if "\n" in match.group(0) else " "


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def extract_page(
    html: str,
    min_chars: int = 100,
    library_fallback: list[str] | None = None,
) -> ExtractedPage:
    """Extract title, body and metadata from an article page."""
    soup = parse_html(html)
    title = extract_title(soup)
    published_date = _first_text(soup, DATE_SELECTOR)
    author = _first_text(soup, AUTHOR_SELECTOR)
    content = extract_content(soup, min_chars)
    if not content and library_fallback:
        content = extract_with_libraries(html, library_fallback, min_chars)
    return ExtractedPage(
        title=clean_text(title),
        content=content,
        published_date=published_date,
        author=author,
    )


def extract_title(soup: BeautifulSoup) -> str:
    for element in soup.select(TITLE_SELECTOR):
        text = element.get_text().strip()
        if text:
            return text
    if soup.title is not None:
        text = soup.title.get_text().replace(" - ", " | ").split(" | ")[0].strip()
        if text:
            return text
    return NO_TITLE


def extract_content(soup: BeautifulSoup, min_chars: int = 100) -> str:
    """Return cleaned body text, or "" when no strategy yields enough text.

    Selector groups are tried in order. Within a group the longest matched
    element wins; if even that is too short the next group is tried.
    """
    for selector in CONTENT_SELECTORS:
        elements = soup.select(selector)
        if not elements:
            continue
        for element in elements:
            for noise in element.select(NOISE_SELECTOR):
                noise.decompose()
        longest = max((element.get_text() for element in elements), key=len)
        content = clean_text(longest)
        if len(content) > min_chars:
            return content

    for caption in soup.select(PHOTO_CAPTION_SELECTOR):
        caption.decompose()
    paragraphs = [p.get_text() for p in soup.find_all("p")]
    content = clean_text("\n".join(paragraphs))
    return content if len(content) > min_chars else ""


def extract_with_libraries(html: str, methods: list[str], min_chars: int = 100) -> str:
    for method in methods:
        extractor = _get_extractor(method)
        if not extractor:
            continue
        text = extractor(html)
        if text:
            cleaned = clean_text(text)
            if len(cleaned) > min_chars:
                return cleaned
    return ""


def _first_text(soup: BeautifulSoup, selector: str) -> str | None:
    element = soup.select_one(selector)
    if element is None:
        return None
    return element.get_text().strip() or None


def _get_extractor(name: str) -> Callable[[str], str | None] | None:
    if name == "trafilatura":
        return _extract_trafilatura
    if name == "readability":
        return _extract_readability
    return None


def _extract_trafilatura(html: str) -> str | None:
    return trafilatura.extract(html)


def _extract_readability(html: str) -> str | None:
    doc = Document(html)
    soup = parse_html(doc.summary())
    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()
    text = soup.get_text(separator="\n")
    return text if text.strip() else None
