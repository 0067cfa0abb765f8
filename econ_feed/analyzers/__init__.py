"""Cache-first enrichment tasks backed by the language model."""

from .base import CachedModelTask
from .curator import Curator, curation_key
from .formatter import Formatter
from .summarizer import Summarizer
from .translator import Translator

__all__ = [
    "CachedModelTask",
    "Curator",
    "Formatter",
    "Summarizer",
    "Translator",
    "curation_key",
]
