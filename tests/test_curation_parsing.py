"""Tests for normalising curation replies."""

from __future__ import annotations

import json

import pytest

from econ_feed.core.types import Category, CurationResult, Urgency
from econ_feed.llm.parsing import (
    CurationValidationError,
    curation_from_cache,
    parse_curation,
    parse_json_object,
    strip_code_fences,
    validate_curation,
)


def test_strip_code_fences():
    assert strip_code_fences('```json\n{"score": 7}\n```') == '{"score": 7}'
    assert strip_code_fences('```\n{"score": 7}\n```') == '{"score": 7}'
    assert strip_code_fences('{"score": 7}') == '{"score": 7}'


def test_parse_full_reply():
    reply = json.dumps(
        {
            "score": 8,
            "reason": "기준금리 결정은 시장 전반에 영향",
            "category": "monetary",
            "urgency": "high",
            "topics": ["기준금리", "한국은행"],
        },
        ensure_ascii=False,
    )
    result = parse_curation(reply)
    assert result.score == 8
    assert result.category is Category.MONETARY
    assert result.urgency is Urgency.HIGH
    assert result.topics == ["기준금리", "한국은행"]


def test_parse_fenced_reply():
    result = parse_curation('```json\n{"score": 6.5, "reason": "ok"}\n```')
    assert result.score == 6.5
    assert result.reason == "ok"


def test_json_embedded_in_prose():
    obj = parse_json_object('Here is the analysis: {"score": 3} hope it helps')
    assert obj == {"score": 3}


def test_missing_fields_get_defaults():
    result = parse_curation('{"score": 4}')
    assert result.reason == "No reason provided"
    assert result.category is Category.OTHER
    assert result.urgency is Urgency.MEDIUM
    assert result.topics == []


def test_unknown_enum_values_fall_back():
    result = parse_curation('{"score": 4, "category": "sports", "urgency": "whenever"}')
    assert result.category is Category.OTHER
    assert result.urgency is Urgency.MEDIUM


def test_non_list_topics_are_dropped():
    assert parse_curation('{"score": 4, "topics": "금리"}').topics == []


@pytest.mark.parametrize(
    "reply",
    [
        '{"score": 11}',
        '{"score": -1}',
        '{"score": "8"}',
        '{"score": true}',
        '{"score": null}',
        '{"reason": "no score"}',
        "[1, 2, 3]",
        "not json at all",
        "",
    ],
)
def test_invalid_replies_become_neutral_default(reply):
    result = parse_curation(reply)
    assert result == CurationResult.default()
    assert result.score == 5
    assert result.reason == "Analysis parsing failed"


def test_boundary_scores_are_accepted():
    assert validate_curation({"score": 0}).score == 0
    assert validate_curation({"score": 10}).score == 10


def test_validate_rejects_nan():
    with pytest.raises(CurationValidationError):
        validate_curation({"score": float("nan")})


def test_cached_payload_round_trip():
    original = CurationResult(score=9, reason="r", category=Category.CURRENCY, urgency=Urgency.BREAKING, topics=["환율"])
    assert curation_from_cache(original.to_dict()) == original


def test_unusable_cached_payload_is_ignored():
    assert curation_from_cache({"score": "high"}) is None
