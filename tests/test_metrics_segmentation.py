"""Tests for word, sentence and paragraph counting."""
from __future__ import annotations

import pytest

from core.metrics import count_paragraphs, count_sentences, count_words


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", 0),
        ("  ", 0),
        ("a b  c", 3),
        ("one\ttwo\nthree\r\nfour", 4),
        ("trailing space ", 2),
    ],
)
def test_count_words(text: str, expected: int) -> None:
    assert count_words(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", 0),
        ("   ", 0),
        ("No punctuation", 1),
        ("Hello. World!", 2),
        ("Hi. ", 2),
        ("A. . B", 3),
        ("...", 0),
        (" \t\n", 0),
        ("Wait... really?!", 2),
        ("One? Two! Three.", 3),
    ],
)
def test_count_sentences(text: str, expected: int) -> None:
    assert count_sentences(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", 0),
        ("   \n\n  ", 0),
        ("a\n\nb", 2),
        ("a\nb", 1),
        ("\n\n   a", 1),
        ("a\r\n\r\nb", 2),
        ("a\r\rb", 2),
        ("a\n\r\nb", 2),
        ("a\n   \nb", 2),
        ("a  b", 1),
        ("a\n\n\n\nb\n\nc\n\n", 3),
        ("a\u2029\u2029b", 2),
        ("a\u2029b", 1),
        ("a\n\u2029b", 2),
        ("a\r\n \u2029b", 2),
    ],
)
def test_count_paragraphs(text: str, expected: int) -> None:
    assert count_paragraphs(text) == expected
