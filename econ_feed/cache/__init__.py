"""
Response cache for model outputs.

Digest-keyed, never-expiring storage of translations, summaries,
curation results and formatted article text.
"""

from .response_cache import CacheKind, ResponseCache, digest
from .stores import CacheStore, FileStore, MemoryStore, NullStore, SupabaseStore, build_store

__all__ = [
    "CacheKind",
    "CacheStore",
    "FileStore",
    "MemoryStore",
    "NullStore",
    "ResponseCache",
    "SupabaseStore",
    "build_store",
    "digest",
]
