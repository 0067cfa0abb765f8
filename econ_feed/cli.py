"""
Command-line interface for econ-feed.

Uses Typer for commands and Rich for output. Loads a .env file so API
keys (OPENAI_API_KEY, NAVER_CLIENT_ID, NAVER_CLIENT_SECRET, SUPABASE_URL,
SUPABASE_SERVICE_ROLE_KEY) can live next to the project.

Example:
    $ econ-feed search 환율 --display 20
    $ econ-feed read https://n.news.naver.com/article/001/0014000000
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Awaitable, TypeVar

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table
import typer

from .config import load_config
from .core.types import FeedResult
from .errors import ConfigurationMissingError, ServiceError
from .logging_utils import setup_llm_logger, setup_logging
from .service import NewsFeedService, build_service

T = TypeVar("T")

app = typer.Typer(add_completion=False, help="Korean economic news feed with AI curation.")
console = Console()

_URGENCY_STYLES = {
    "breaking": "bold red",
    "high": "red",
    "medium": "yellow",
    "low": "green",
}


@app.callback()
def main(
    ctx: typer.Context,
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, readable=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_file: bool | None = typer.Option(
        None, "--log-file/--no-log-file", help="Enable or disable file logging."
    ),
    cache: bool | None = typer.Option(
        None, "--cache/--no-cache", help="Enable or disable the response cache."
    ),
    cache_backend: str | None = typer.Option(
        None, "--cache-backend", help="Cache backend: supabase, file or memory."
    ),
    provider: str | None = typer.Option(None, "--provider", help="LLM provider: openai or gemini."),
    model: str | None = typer.Option(None, "--model", help="LLM model identifier."),
    api_key: str | None = typer.Option(None, "--api-key", help="Override provider API key."),
):
    """Load configuration and build the feed service shared by all commands."""
    load_dotenv()
    cfg = load_config(str(config) if config else None)

    if log_level:
        cfg.logging.level = log_level
    if log_file is not None:
        cfg.logging.file = log_file
    if cache is not None:
        cfg.cache.enabled = cache
    if cache_backend:
        cfg.cache.backend = cache_backend
    if provider:
        cfg.provider.name = provider
    if model:
        cfg.provider.model = model
    if api_key:
        cfg.provider.api_key = api_key

    setup_logging(cfg.logging)
    llm_logger = setup_llm_logger(cfg.logging)
    ctx.obj = build_service(cfg, llm_logger)


@app.command()
def search(
    ctx: typer.Context,
    keyword: str = typer.Argument(..., help="Search keyword, e.g. 환율 or 금리."),
    display: int | None = typer.Option(None, "--display", "-n", help="Number of articles (max 100)."),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    """Search news and rank results by market impact."""
    service: NewsFeedService = ctx.obj
    result = _run(service.search(keyword, display))
    if as_json:
        _print_json(result.to_dict())
        return
    _render_feed(result)


@app.command()
def scrape(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Article URL."),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    """Extract the title and body of an article page."""
    service: NewsFeedService = ctx.obj
    article = _run(service.scrape(url))
    if as_json:
        _print_json(article.to_dict())
        return
    console.print(f"[bold]{escape(article.title)}[/bold]")
    meta = " · ".join(part for part in (article.author, article.published_date) if part)
    if meta:
        console.print(f"[dim]{escape(meta)}[/dim]")
    console.print(f"[dim]{article.word_count} words[/dim]\n")
    console.print(escape(article.content))


@app.command()
def read(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Article URL."),
    translate: bool = typer.Option(True, "--translate/--no-translate"),
    summarize: bool = typer.Option(True, "--summary/--no-summary"),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    """Scrape an article, reformat it, then summarize and translate it."""
    service: NewsFeedService = ctx.obj
    reading = _run(service.read_article(url, translate=translate, summarize=summarize))
    if as_json:
        _print_json(reading.to_dict())
        return
    console.print(f"[bold]{escape(reading.article.title)}[/bold]\n")
    if reading.summary:
        console.rule("요약")
        console.print(escape(reading.summary))
    console.rule("본문")
    console.print(escape(reading.formatted))
    if reading.translation:
        console.rule("English")
        console.print(escape(reading.translation))


@app.command("format")
def format_text(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Korean article text."),
):
    """Break article text into readable paragraphs."""
    service: NewsFeedService = ctx.obj
    console.print(escape(_run(service.format_content(text))))


@app.command()
def translate(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Korean text to translate."),
):
    """Translate Korean text to English."""
    service: NewsFeedService = ctx.obj
    console.print(escape(_run(service.translate(text))))


@app.command()
def summarize(
    ctx: typer.Context,
    title: str = typer.Option("", "--title", "-t"),
    description: str = typer.Option("", "--description", "-d"),
    content: str | None = typer.Option(None, "--content", help="Full article text, if available."),
):
    """Summarize an article in Korean."""
    service: NewsFeedService = ctx.obj
    console.print(escape(_run(service.summarize(title, description, content))))


def _run(coro: Awaitable[T]) -> T:
    try:
        return asyncio.run(coro)
    except (ConfigurationMissingError, ServiceError, ValueError) as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


def _print_json(data: dict[str, Any]) -> None:
    console.print_json(json.dumps(data, ensure_ascii=False))


def _render_feed(result: FeedResult) -> None:
    table = Table(title=f"{result.keyword} · {result.total_articles} articles")
    table.add_column("Score", justify="right")
    table.add_column("Urgency")
    table.add_column("Category")
    table.add_column("Title")
    table.add_column("Topics")
    for article in result.articles:
        curation = article.curation
        urgency = curation.urgency.value
        table.add_row(
            f"{curation.score:g}",
            f"[{_URGENCY_STYLES.get(urgency, 'white')}]{urgency}[/]",
            curation.category.value,
            f"[link={article.item.link}]{escape(article.item.title)}[/link]",
            escape(", ".join(curation.topics)),
        )
    console.print(table)
    if result.average_importance is not None:
        console.print(f"Average importance: {result.average_importance:.1f}")


if __name__ == "__main__":
    app()
