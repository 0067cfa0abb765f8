"""
Content-addressed cache for model outputs.

Entries are keyed by the MD5 digest of the semantic input text (an article
body, or "title description") and a cache kind. Entries never expire.
The cache is a pure accelerator: every store failure is logged and then
treated as a miss (reads) or ignored (writes).
"""

from __future__ import annotations

from enum import Enum
import hashlib
import logging
from typing import Any

from ..logging_utils import log_event
from .stores import CacheStore

logger = logging.getLogger(__name__)


class CacheKind(str, Enum):
    TRANSLATION = "translation"
    SUMMARY = "summary"
    CURATION = "curation"
    FORMATTING = "formatting"


def digest(semantic_key: str) -> str:
    """Return the 128-bit hex digest used as the storage key."""
    return hashlib.md5(semantic_key.encode("utf-8")).hexdigest()


class ResponseCache:
    """Read-through/write-behind helper around a CacheStore."""

    def __init__(self, store: CacheStore) -> None:
        self.store = store

    async def put(self, kind: CacheKind, semantic_key: str, payload: Any) -> None:
        cache_key = digest(semantic_key)
        record = {
            "cache_key": cache_key,
            "cache_type": kind.value,
            "data": payload,
            "expires_at": None,
        }
        try:
            await self.store.upsert(record)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Cache write failed (%s %s): %s", kind.value, cache_key, exc)
            return
        log_event(logger, "Cache write", event="cache_write", kind=kind.value, cache_key=cache_key)

    async def get(self, kind: CacheKind, semantic_key: str) -> Any | None:
        cache_key = digest(semantic_key)
        try:
            payload = await self.store.fetch(cache_key, kind.value)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Cache read failed (%s %s): %s", kind.value, cache_key, exc)
            return None
        log_event(
            logger,
            "Cache hit" if payload is not None else "Cache miss",
            event="cache_hit" if payload is not None else "cache_miss",
            kind=kind.value,
            cache_key=cache_key,
        )
        return payload

    async def _get_field(self, kind: CacheKind, text: str, field: str) -> Any | None:
        payload = await self.get(kind, text)
        if not isinstance(payload, dict):
            return None
        return payload.get(field)

    async def get_translation(self, text: str) -> str | None:
        return await self._get_field(CacheKind.TRANSLATION, text, "translation")

    async def set_translation(self, text: str, translation: str) -> None:
        await self.put(CacheKind.TRANSLATION, text, {"original": text, "translation": translation})

    async def get_summary(self, text: str) -> str | None:
        return await self._get_field(CacheKind.SUMMARY, text, "summary")

    async def set_summary(self, text: str, summary: str) -> None:
        await self.put(CacheKind.SUMMARY, text, {"original": text, "summary": summary})

    async def get_curation(self, text: str) -> dict[str, Any] | None:
        curation = await self._get_field(CacheKind.CURATION, text, "curation")
        return curation if isinstance(curation, dict) else None

    async def set_curation(self, text: str, curation: dict[str, Any]) -> None:
        await self.put(CacheKind.CURATION, text, {"original": text, "curation": curation})

    async def get_formatting(self, text: str) -> str | None:
        return await self._get_field(CacheKind.FORMATTING, text, "formatted")

    async def set_formatting(self, text: str, formatted: str) -> None:
        await self.put(CacheKind.FORMATTING, text, {"original": text, "formatted": formatted})
