"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- FetchConfig: Article page fetching and extraction settings
- ProviderConfig: Language-model provider settings
- SearchConfig: News search (Naver Open API) settings
- CacheConfig: Response cache backend settings
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container

Secrets (API keys, store credentials) are never stored inline by default;
the config only names the environment variables that hold them.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
import os
from typing import Any

import yaml


@dataclass
class FetchConfig:
    """Configuration for article page fetching.

    Attributes:
        timeout_seconds: HTTP request timeout
        max_redirects: Maximum number of redirects to follow
        retries: Number of retry attempts after the first failed scrape
        backoff_seconds: Base wait between attempts (multiplied by attempt number)
        trust_env: Whether to respect system proxy settings
        user_agent: HTTP User-Agent header string
        accept_language: Accept-Language header (Korean first)
        min_content_chars: Body text must be longer than this to be accepted
        library_fallback: Extra extractors tried after the paragraph fallback
            ("trafilatura", "readability"); empty keeps extraction selector-only
    """

    timeout_seconds: float = 30.0
    max_redirects: int = 5
    retries: int = 2
    backoff_seconds: float = 1.0
    trust_env: bool = True
    user_agent: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    )
    accept_language: str = "ko-KR,ko;q=0.8,en-US;q=0.5,en;q=0.3"
    min_content_chars: int = 100
    library_fallback: list[str] = field(default_factory=list)


@dataclass
class ProviderConfig:
    """Configuration for the language-model provider.

    Attributes:
        name: Provider name ("openai" or "gemini")
        model: Model identifier (e.g., "gpt-4o-mini")
        api_key_env: Environment variable name containing the API key
        base_url: Base URL for the provider API (provider default when unset)
        api_key: Optional inline API key (overrides env var)
        timeout_seconds: Request timeout for model calls
        trust_env: Whether to respect system proxy settings for API requests
    """

    name: str = "openai"
    model: str = "gpt-4o-mini"
    api_key_env: str = "OPENAI_API_KEY"
    base_url: str | None = None
    api_key: str | None = None
    timeout_seconds: float = 60.0
    trust_env: bool = True


@dataclass
class SearchConfig:
    """Configuration for the Naver news search API.

    Attributes:
        client_id_env: Environment variable holding the Naver client id
        client_secret_env: Environment variable holding the Naver client secret
        base_url: News search endpoint
        display: Default number of results (capped at 100 by the API)
        sort: "sim" for relevance, "date" for recency
        dedup_enabled: Drop near-duplicate titles from search results
        title_similarity_threshold: Fuzzy match threshold (0-100) for duplicates
    """

    client_id_env: str = "NAVER_CLIENT_ID"
    client_secret_env: str = "NAVER_CLIENT_SECRET"
    base_url: str = "https://openapi.naver.com/v1/search/news.json"
    display: int = 10
    sort: str = "sim"
    dedup_enabled: bool = False
    title_similarity_threshold: int = 92


@dataclass
class CacheConfig:
    """Configuration for the response cache.

    Attributes:
        enabled: Whether cached model outputs are read and written
        backend: "supabase", "file" or "memory"
        supabase_url_env: Environment variable holding the Supabase project URL
        supabase_key_env: Environment variable holding the service role key
        table: Table holding cache entries
        directory: Directory used by the "file" backend
        timeout_seconds: Request timeout for the remote store
    """

    enabled: bool = True
    backend: str = "supabase"
    supabase_url_env: str = "SUPABASE_URL"
    supabase_key_env: str = "SUPABASE_SERVICE_ROLE_KEY"
    table: str = "cache_entries"
    directory: str = ".econ_feed_cache"
    timeout_seconds: float = 10.0


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Path of the main log file
        llm_log_enabled: Whether to write model prompts/responses to a separate log
        llm_log_file: Path of the model interaction log
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "econ_feed.jsonl"
    llm_log_enabled: bool = False
    llm_log_file: str = "llm.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    fetch: FetchConfig = field(default_factory=FetchConfig)
    provider: ProviderConfig = field(default_factory=ProviderConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        fetch=FetchConfig(**data["fetch"]),
        provider=ProviderConfig(**data["provider"]),
        search=SearchConfig(**data["search"]),
        cache=CacheConfig(**data["cache"]),
        logging=LoggingConfig(**data["logging"]),
    )


def get_api_key(cfg: ProviderConfig) -> str | None:
    """Get API key from inline config or environment variable."""
    if cfg.api_key:
        return cfg.api_key
    return os.getenv(cfg.api_key_env)


def get_search_credentials(cfg: SearchConfig) -> tuple[str, str] | None:
    """Return (client_id, client_secret) or None when either is missing."""
    client_id = os.getenv(cfg.client_id_env)
    client_secret = os.getenv(cfg.client_secret_env)
    if not client_id or not client_secret:
        return None
    return client_id, client_secret


def get_supabase_credentials(cfg: CacheConfig) -> tuple[str, str] | None:
    """Return (project_url, service_key) or None when either is missing."""
    url = os.getenv(cfg.supabase_url_env)
    key = os.getenv(cfg.supabase_key_env)
    if not url or not key:
        return None
    return url, key
