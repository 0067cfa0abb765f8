"""
Backing stores for the response cache.

A store holds records shaped as
``{"cache_key", "cache_type", "data", "expires_at"}`` and supports upsert
and point lookup by ``(cache_key, cache_type)``. Stores raise on failure;
the ResponseCache decides what a failure means.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import copy
import json
import logging
from pathlib import Path
from typing import Any

import httpx

from ..config import CacheConfig, get_supabase_credentials

logger = logging.getLogger(__name__)


class CacheStore(ABC):
    """Keyed record store addressed by (cache_key, cache_type)."""

    @abstractmethod
    async def upsert(self, record: dict[str, Any]) -> None:
        """Insert or replace the record with the same (cache_key, cache_type)."""
        raise NotImplementedError

    @abstractmethod
    async def fetch(self, cache_key: str, cache_type: str) -> Any | None:
        """Return the stored ``data`` field, or None when absent."""
        raise NotImplementedError


class NullStore(CacheStore):
    """Store used when caching is disabled or unconfigured."""

    async def upsert(self, record: dict[str, Any]) -> None:
        return None

    async def fetch(self, cache_key: str, cache_type: str) -> Any | None:
        return None


class MemoryStore(CacheStore):
    """Process-local store."""

    def __init__(self) -> None:
        self.records: dict[tuple[str, str], dict[str, Any]] = {}

    async def upsert(self, record: dict[str, Any]) -> None:
        key = (record["cache_key"], record["cache_type"])
        self.records[key] = copy.deepcopy(record)

    async def fetch(self, cache_key: str, cache_type: str) -> Any | None:
        record = self.records.get((cache_key, cache_type))
        if record is None:
            return None
        return copy.deepcopy(record["data"])


class FileStore(CacheStore):
    """One JSON file per record under ``<directory>/<cache_type>/<cache_key>.json``."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def path_for(self, cache_key: str, cache_type: str) -> Path:
        return self.directory / cache_type / f"{cache_key}.json"

    async def upsert(self, record: dict[str, Any]) -> None:
        path = self.path_for(record["cache_key"], record["cache_type"])
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as handle:
            json.dump(record, handle, ensure_ascii=False)

    async def fetch(self, cache_key: str, cache_type: str) -> Any | None:
        path = self.path_for(cache_key, cache_type)
        if not path.exists():
            return None
        with path.open("r", encoding="utf-8") as handle:
            record = json.load(handle)
        return record.get("data")


class SupabaseStore(CacheStore):
    """Supabase table accessed through its PostgREST endpoint.

    Expects a table with columns ``cache_key text``, ``cache_type text``,
    ``data jsonb``, ``expires_at timestamptz null`` and a unique constraint
    on ``(cache_key, cache_type)``.
    """

    def __init__(
        self,
        project_url: str,
        service_key: str,
        table: str = "cache_entries",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.endpoint = f"{project_url.rstrip('/')}/rest/v1/{table}"
        self.service_key = service_key
        self.timeout = timeout
        self.transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "apikey": self.service_key,
            "Authorization": f"Bearer {self.service_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def upsert(self, record: dict[str, Any]) -> None:
        headers = self._headers()
        headers["Prefer"] = "resolution=merge-duplicates,return=minimal"
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            resp = await client.post(
                self.endpoint,
                params={"on_conflict": "cache_key,cache_type"},
                headers=headers,
                json=record,
            )
            resp.raise_for_status()

    async def fetch(self, cache_key: str, cache_type: str) -> Any | None:
        params = {
            "select": "data",
            "cache_key": f"eq.{cache_key}",
            "cache_type": f"eq.{cache_type}",
            "limit": "1",
        }
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            resp = await client.get(self.endpoint, params=params, headers=self._headers())
            resp.raise_for_status()
            rows = resp.json()
        if not rows:
            return None
        return rows[0].get("data")


def build_store(cfg: CacheConfig) -> CacheStore:
    """Create the configured backing store.

    A Supabase backend without credentials degrades to NullStore: the
    pipeline still works, it just pays for every model call.
    """
    if not cfg.enabled:
        return NullStore()
    backend = cfg.backend.lower().strip()
    if backend == "memory":
        return MemoryStore()
    if backend == "file":
        return FileStore(Path(cfg.directory))
    if backend == "supabase":
        credentials = get_supabase_credentials(cfg)
        if credentials is None:
            logger.warning(
                "Supabase credentials missing (%s / %s); response cache disabled",
                cfg.supabase_url_env,
                cfg.supabase_key_env,
            )
            return NullStore()
        project_url, service_key = credentials
        return SupabaseStore(project_url, service_key, table=cfg.table, timeout=cfg.timeout_seconds)
    raise ValueError(f"Unsupported cache backend: {cfg.backend}. Supported: file, memory, supabase")
