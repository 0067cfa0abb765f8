"""Prompt loading and rendering helpers for LLM providers."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path


_PROMPT_DIR = Path(__file__).resolve().parent.parent / "prompts"

# Inputs longer than this are treated as full article bodies rather than
# headline + snippet.
LONG_TEXT_THRESHOLD = 500


@lru_cache(maxsize=None)
def _load_template(name: str) -> str:
    path = _PROMPT_DIR / f"{name}.md"
    return path.read_text(encoding="utf-8").strip()


def _render_template(name: str, **values: str) -> str:
    template = _load_template(name)
    return template.format(**values)


def is_long_text(text: str) -> bool:
    return len(text) > LONG_TEXT_THRESHOLD


def build_curation_prompt(title: str, description: str) -> str:
    return _render_template("curation", title=title, description=description)


def build_formatting_prompt(text: str) -> str:
    return _render_template("formatting", text=text)


def build_translation_prompt(text: str) -> str:
    name = "translation_long" if is_long_text(text) else "translation_short"
    return _render_template(name, text=text)


def build_summary_prompt(text: str, title: str = "", description: str = "") -> str:
    """Pick the long template for full article text, else the headline one."""
    if is_long_text(text):
        return _render_template("summary_long", text=text)
    return _render_template("summary_short", title=title, description=description)
