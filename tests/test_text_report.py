"""Tests for the aggregated text report and its serialization."""
from __future__ import annotations

import json

import pytest

from common.errors import ErrorCode, StringityError
from common.models import TextReport
from common.serialization import deserialize_text_report, format_text_report, serialize_text_report
from common.versioning import LEGACY_TEXT_REPORT_FORMAT_VERSION, TEXT_REPORT_FORMAT_VERSION
from core.metrics import build_text_report

SAMPLE = "Hello world.\n\nBye now!"


def test_build_text_report_counts_everything() -> None:
    report = build_text_report(SAMPLE)

    assert report.characters == 22
    assert report.code_units == 22
    assert report.logical_length == 22
    assert report.words == 4
    assert report.sentences == 2
    assert report.paragraphs == 2
    assert report.vowels == 5
    assert report.consonants == 11
    assert report.digits == 0
    assert report.uppercase == 2
    assert report.lowercase == 14
    assert report.whitespace == 4
    assert report.punctuation == 2
    assert report.most_frequent_character == "l"
    assert report.least_frequent_character == "H"
    assert report.most_frequent_word == "Hello"
    assert report.least_frequent_word == "Hello"


def test_empty_text_report() -> None:
    report = build_text_report("")
    assert report.is_empty
    assert report == TextReport()


def test_serialized_report_is_json_ready() -> None:
    payload = serialize_text_report(build_text_report(SAMPLE))

    assert payload["format_version"] == TEXT_REPORT_FORMAT_VERSION
    assert payload["counts"]["paragraphs"] == 2
    assert payload["frequency"]["most_frequent_character"] == "l"
    restored = deserialize_text_report(json.loads(json.dumps(payload)))
    assert restored == build_text_report(SAMPLE)


def test_legacy_report_without_code_units_falls_back_to_characters() -> None:
    legacy = {
        "format_version": LEGACY_TEXT_REPORT_FORMAT_VERSION,
        "counts": {"characters": 5, "words": 1},
        "frequency": {"most_frequent_word": "hello"},
    }
    report = deserialize_text_report(legacy)
    assert report.code_units == 5
    assert report.words == 1
    assert report.most_frequent_word == "hello"
    assert report.least_frequent_word == ""


def test_unknown_report_version_is_rejected() -> None:
    with pytest.raises(StringityError) as exc:
        deserialize_text_report({"format_version": "9.9.9"})
    assert exc.value.code == ErrorCode.INPUT_ERROR


def test_format_text_report_aligns_rows() -> None:
    rendered = format_text_report(build_text_report("Hi"))
    lines = rendered.splitlines()

    assert lines[0].startswith("characters")
    assert lines[0].endswith(": 2")
    assert "most frequent word" in rendered
    assert rendered.count(" : ") == len(lines)
    assert len({line.index(" : ") for line in lines}) == 1
    assert "'Hi'" in rendered
