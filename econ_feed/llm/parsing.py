"""
Normalisation of structured model output.

Curation replies go through a fixed pipeline:
strip code fences -> parse JSON -> validate -> fill defaults.
Any failure along the way yields CurationResult.default().
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from ..core.types import Category, CurationResult, Urgency

logger = logging.getLogger(__name__)

_FENCE_OPEN_RE = re.compile(r"```json\s*", re.IGNORECASE)
_FENCE_RE = re.compile(r"```\s*")


class CurationValidationError(ValueError):
    """Parsed JSON does not describe a valid curation result."""


def strip_code_fences(content: str) -> str:
    """Remove markdown code fences wrapped around a JSON reply.

    Examples:
        >>> strip_code_fences('```json\\n{"score": 7}\\n```')
        '{"score": 7}'
    """
    content = _FENCE_OPEN_RE.sub("", content)
    content = _FENCE_RE.sub("", content)
    return content.strip()


def parse_json_object(content: str) -> dict[str, Any]:
    if not content:
        raise json.JSONDecodeError("Empty content", content or "", 0)
    cleaned = strip_code_fences(content)
    try:
        obj = json.loads(cleaned)
    except json.JSONDecodeError:
        obj = json.loads(_extract_json_snippet(cleaned))
    if not isinstance(obj, dict):
        raise json.JSONDecodeError("Expected a JSON object", cleaned, 0)
    return obj


def validate_curation(obj: dict[str, Any]) -> CurationResult:
    """Build a CurationResult from parsed JSON.

    Raises:
        CurationValidationError: When score is missing, non-numeric or
            outside [0, 10]
    """
    score = obj.get("score")
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        raise CurationValidationError(f"Invalid score: {score!r}")
    if not 0 <= score <= 10:
        raise CurationValidationError(f"Score out of range: {score!r}")

    topics = obj.get("topics")
    if not isinstance(topics, list):
        topics = []

    return CurationResult(
        score=score,
        reason=str(obj.get("reason") or "No reason provided"),
        category=Category.parse(obj.get("category") or "other"),
        urgency=Urgency.parse(obj.get("urgency") or "medium"),
        topics=[str(topic) for topic in topics if str(topic).strip()],
    )


def parse_curation(content: str) -> CurationResult:
    try:
        return validate_curation(parse_json_object(content))
    except (json.JSONDecodeError, CurationValidationError) as exc:
        logger.warning("Curation parsing failed: %s; raw response: %.200s", exc, content)
        return CurationResult.default()


def curation_from_cache(payload: dict[str, Any]) -> CurationResult | None:
    """Rebuild a cached curation, or None if the entry is unusable."""
    try:
        return validate_curation(payload)
    except CurationValidationError:
        return None


def _extract_json_snippet(content: str) -> str:
    start = content.find("{")
    end = content.rfind("}")
    if start == -1 or end == -1 or end <= start:
        raise json.JSONDecodeError("No JSON object found", content, 0)
    return content[start : end + 1]
