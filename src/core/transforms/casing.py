"""Case-style conversions and per-character case games."""
from __future__ import annotations

import re
from typing import List

from common.text import is_letter, is_upper, lower_char, upper_char

_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_WORD_SEPARATORS = re.compile(r"[\s_\-]+")


def to_snake_case(text: str) -> str:
    return _join_lower(text, "_")


def to_kebab_case(text: str) -> str:
    return _join_lower(text, "-")


def to_camel_case(text: str) -> str:
    if _is_blank(text):
        return text
    words = _split_words(text)
    if not words:
        return text
    return words[0].lower() + "".join(_capitalize(word) for word in words[1:])


def to_pascal_case(text: str) -> str:
    if _is_blank(text):
        return text
    words = _split_words(text)
    return "".join(_capitalize(word) for word in words) if words else text


def to_title_case(text: str) -> str:
    if _is_blank(text):
        return text
    words = _split_words(text)
    return " ".join(_capitalize(word) for word in words) if words else text


def swap_case(text: str) -> str:
    if _is_blank(text):
        return text
    return "".join(_swap(char) for char in text)


def to_sarcasm(text: str) -> str:
    """Alternate case by position: even indexes lower, odd indexes upper."""

    return "".join(
        lower_char(char) if index % 2 == 0 else upper_char(char) for index, char in enumerate(text)
    )


def _join_lower(text: str, separator: str) -> str:
    if _is_blank(text):
        return text
    joined = _CAMEL_BOUNDARY.sub(rf"\1{separator}\2", text)
    for source in ("-", "_", " "):
        if source != separator:
            joined = joined.replace(source, separator)
    return joined.lower()


def _split_words(text: str) -> List[str]:
    # Leading/trailing separators produce empty words; they carry nothing.
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _capitalize(word: str) -> str:
    return upper_char(word[0]) + word[1:].lower()


def _swap(char: str) -> str:
    if not is_letter(char):
        return char
    return lower_char(char) if is_upper(char) else upper_char(char)


def _is_blank(text: str) -> bool:
    return not text or text.isspace()
