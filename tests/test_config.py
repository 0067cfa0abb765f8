"""Tests for YAML configuration loading."""

from __future__ import annotations

from econ_feed.config import (
    AppConfig,
    CacheConfig,
    ProviderConfig,
    get_api_key,
    get_supabase_credentials,
    load_config,
)


def test_no_path_gives_defaults():
    cfg = load_config(None)
    assert cfg == AppConfig()
    assert cfg.fetch.timeout_seconds == 30
    assert cfg.fetch.max_redirects == 5
    assert cfg.fetch.retries == 2
    assert cfg.fetch.accept_language.startswith("ko-KR")
    assert cfg.cache.backend == "supabase"
    assert cfg.search.display == 10


def test_yaml_sections_merge_over_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        """
provider:
  name: gemini
  model: gemini-2.0-flash
  api_key_env: GOOGLE_API_KEY
search:
  display: 30
cache:
  backend: file
  directory: /tmp/econ-cache
fetch:
  library_fallback: [trafilatura]
unknown_section:
  ignored: true
""",
        encoding="utf-8",
    )

    cfg = load_config(str(path))

    assert cfg.provider.name == "gemini"
    assert cfg.provider.api_key_env == "GOOGLE_API_KEY"
    assert cfg.provider.timeout_seconds == 60
    assert cfg.search.display == 30
    assert cfg.search.sort == "sim"
    assert cfg.cache.backend == "file"
    assert cfg.cache.directory == "/tmp/econ-cache"
    assert cfg.fetch.library_fallback == ["trafilatura"]
    assert cfg.fetch.retries == 2


def test_empty_yaml_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(str(path)) == AppConfig()


def test_inline_api_key_wins_over_environment(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "from-env")
    assert get_api_key(ProviderConfig()) == "from-env"
    assert get_api_key(ProviderConfig(api_key="inline")) == "inline"


def test_supabase_credentials_need_both_values(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://project.supabase.co")
    monkeypatch.delenv("SUPABASE_SERVICE_ROLE_KEY", raising=False)
    assert get_supabase_credentials(CacheConfig()) is None

    monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "key")
    assert get_supabase_credentials(CacheConfig()) == ("https://project.supabase.co", "key")
