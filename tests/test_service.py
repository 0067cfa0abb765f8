"""End-to-end tests for the feed service with stubbed network and model."""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from econ_feed.analyzers import Curator, Formatter, Summarizer, Translator
from econ_feed.cache import MemoryStore, ResponseCache
from econ_feed.config import AppConfig
from econ_feed.errors import ConfigurationMissingError, ServiceError
from econ_feed.fetch.scraper import ArticleScraper
from econ_feed.llm.providers.base import ProviderDisabled
from econ_feed.search.naver import NaverNewsClient
from econ_feed.service import CURATION_UNAVAILABLE, NewsFeedService, build_service, validate_url


NEWS = [
    ("환율 급등", "원/달러 환율 1,400원 돌파", 9),
    ("은행 점포 축소", "시중은행 지점 정리", 4),
    ("수출 회복세", "반도체 수출 증가", 7),
    ("카드 혜택 변경", "연말 카드 혜택", 4),
]
BODY = "원/달러 환율이 장중 1,400원을 넘어서며 외환시장의 변동성이 커지고 있다. " * 15
ARTICLE_HTML = f"<title>환율 급등 | 경제신문</title><div id='dic_area'>{BODY}</div>"


def _naver_transport() -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        items = [
            {"title": f"<b>{title}</b>", "description": desc, "link": f"https://news.example.com/{i}", "pubDate": ""}
            for i, (title, desc, _) in enumerate(NEWS)
        ]
        return httpx.Response(200, json={"items": items})

    return httpx.MockTransport(handler)


def _page_transport(status: int = 200) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        if status != 200:
            return httpx.Response(status)
        return httpx.Response(200, text=ARTICLE_HTML, headers={"content-type": "text/html; charset=utf-8"})

    return httpx.MockTransport(handler)


def _model_reply(prompt: str) -> str:
    for title, _, score in NEWS:
        if f'Title: "{title}"' in prompt and "market impact" in prompt:
            return json.dumps({"score": score, "reason": "r", "category": "currency", "urgency": "high"})
    if prompt.startswith("Reformat"):
        return "포맷된 본문"
    if prompt.startswith("Summarize"):
        return "요약문"
    if prompt.startswith("Translate"):
        return "English text"
    raise AssertionError(f"unexpected prompt: {prompt[:60]}")


async def _no_sleep(seconds: float) -> None:
    return None


def _service(provider, store=None, page_status=200):
    cache = ResponseCache(store or MemoryStore())
    return NewsFeedService(
        scraper=ArticleScraper(transport=_page_transport(page_status), sleep=_no_sleep),
        search_client=NaverNewsClient(credentials=("id", "secret"), transport=_naver_transport()),
        curator=Curator(provider, cache),
        formatter=Formatter(provider, cache),
        translator=Translator(provider, cache),
        summarizer=Summarizer(provider, cache),
    )


def test_search_ranks_articles_and_reuses_cache(make_provider):
    provider = make_provider(_model_reply)
    service = _service(provider)

    first = asyncio.run(service.search("환율"))

    assert first.keyword == "환율"
    assert first.total_articles == 4
    assert [a.item.title for a in first.articles] == ["환율 급등", "수출 회복세", "은행 점포 축소", "카드 혜택 변경"]
    assert first.average_importance == pytest.approx(6.0)
    assert len(provider.calls) == 4

    second = asyncio.run(service.search("환율"))

    assert len(provider.calls) == 4
    assert second.to_dict() == first.to_dict()


def test_search_payload_shape(make_provider):
    result = asyncio.run(_service(make_provider(_model_reply)).search("환율"))
    data = result.to_dict()

    assert data["totalArticles"] == 4
    assert data["averageImportance"] == pytest.approx(6.0)
    top = data["articles"][0]
    assert top["importanceScore"] == 9
    assert top["category"] == "currency"
    assert top["urgency"] == "high"
    assert top["link"] == "https://news.example.com/0"


def test_search_without_model_returns_uncurated_articles():
    service = _service(ProviderDisabled("no key"))

    result = asyncio.run(service.search("환율"))

    assert [a.item.title for a in result.articles] == [title for title, _, _ in NEWS]
    assert all(a.importance_score == 5 for a in result.articles)
    assert all(a.curation.reason == CURATION_UNAVAILABLE for a in result.articles)
    assert result.average_importance is None
    assert "averageImportance" not in result.to_dict()


def test_search_api_failure_is_service_error(make_provider):
    service = _service(make_provider(_model_reply))
    service.search_client.transport = httpx.MockTransport(lambda request: httpx.Response(500))

    with pytest.raises(ServiceError, match="Failed to search news"):
        asyncio.run(service.search("환율"))


def test_search_without_credentials(make_provider, monkeypatch):
    monkeypatch.delenv("NAVER_CLIENT_ID", raising=False)
    monkeypatch.delenv("NAVER_CLIENT_SECRET", raising=False)
    service = _service(make_provider(_model_reply))
    service.search_client = NaverNewsClient()

    with pytest.raises(ConfigurationMissingError):
        asyncio.run(service.search("환율"))


@pytest.mark.parametrize(
    "url, message",
    [("", "URL is required"), ("not a url", "Invalid URL format"), ("ftp://example.com/a", "Invalid URL format")],
)
def test_validate_url(url, message):
    with pytest.raises(ValueError, match=message):
        validate_url(url)


def test_scrape_failure_is_service_error(make_provider):
    service = _service(make_provider(_model_reply), page_status=404)

    with pytest.raises(ServiceError, match="status code 404"):
        asyncio.run(service.scrape("https://news.example.com/gone"))


def test_read_article_pipeline(make_provider):
    provider = make_provider(_model_reply)
    service = _service(provider)

    reading = asyncio.run(service.read_article("https://news.example.com/0"))

    assert reading.article.title == "환율 급등"
    assert reading.formatted == "포맷된 본문"
    assert reading.summary == "요약문"
    assert reading.translation == "English text"
    assert sorted(call["task"] for call in provider.calls) == ["formatting", "summary", "translation"]
    data = reading.to_dict()
    assert data["formattedContent"] == "포맷된 본문"
    assert data["wordCount"] == len(BODY.split())


def test_read_article_optional_steps(make_provider):
    provider = make_provider(_model_reply)
    service = _service(provider)

    reading = asyncio.run(service.read_article("https://news.example.com/0", translate=False, summarize=False))

    assert reading.summary is None
    assert reading.translation is None
    assert [call["task"] for call in provider.calls] == ["formatting"]


def test_model_failure_is_service_error(make_provider):
    service = _service(make_provider(error=httpx.ConnectError("model unreachable")))

    with pytest.raises(ServiceError, match="Failed to translate text"):
        asyncio.run(service.translate("환율"))


def test_build_service_without_keys_disables_ai(monkeypatch):
    for name in ("OPENAI_API_KEY", "SUPABASE_URL", "SUPABASE_SERVICE_ROLE_KEY"):
        monkeypatch.delenv(name, raising=False)

    service = build_service(AppConfig())

    assert service.curator.enabled is False
    with pytest.raises(ConfigurationMissingError):
        asyncio.run(service.translate("환율"))
