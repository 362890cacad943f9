"""Delimiter-based word, sentence and paragraph segmentation."""
from __future__ import annotations

import re
from typing import List

from common.text import is_whitespace

_WORD_DELIMITERS = re.compile(r"[ \t\n\r]+")
_SENTENCE_DELIMITERS = re.compile(r"[.!?]")
# Word tokens for frequency analysis also break on basic punctuation.
_TOKEN_DELIMITERS = re.compile(r"[ \t\n\r.,!?]+")

_LINE_BREAKS = frozenset("\r\n\u2029")


def split_words(text: str) -> List[str]:
    return [segment for segment in _WORD_DELIMITERS.split(text) if segment]


def split_tokens(text: str) -> List[str]:
    """Split on whitespace and ``. , ! ?`` for frequency analysis."""

    return [segment for segment in _TOKEN_DELIMITERS.split(text) if segment]


def count_words(text: str) -> int:
    return len(split_words(text))


def count_sentences(text: str) -> int:
    """Count non-empty segments between ``.``, ``!`` and ``?``.

    Each mark is its own delimiter, so ``"Wait... really?!"`` yields two
    sentences and runs of marks never merge. A segment of spaces still
    counts (``"Hi. "`` is two); blank input has no sentences at all.
    """

    if not text.strip():
        return 0
    return sum(1 for segment in _SENTENCE_DELIMITERS.split(text) if segment)


def count_paragraphs(text: str) -> int:
    """Count paragraphs separated by two or more consecutive line breaks.

    ``\\r\\n``, ``\\r``, ``\\n`` and U+2029 each count as one break, in any
    mixture; other whitespace between breaks does not end the run. A paragraph
    is only counted once a non-whitespace character follows, so leading and
    trailing blank lines are ignored.
    """

    paragraphs = 0
    breaks = 0
    inside = False
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if char in _LINE_BREAKS:
            breaks += 1
            if char == "\r" and index + 1 < length and text[index + 1] == "\n":
                index += 1
        elif not is_whitespace(char):
            if not inside or breaks >= 2:
                paragraphs += 1
                inside = True
            breaks = 0
        index += 1
    return paragraphs
