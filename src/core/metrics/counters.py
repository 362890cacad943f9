"""Single-pass character class counters."""
from __future__ import annotations

from typing import Callable

from common.text import (
    is_consonant,
    is_digit,
    is_lower,
    is_punctuation,
    is_upper,
    is_vowel,
    is_whitespace,
)


def count_matching(text: str, predicate: Callable[[str], bool]) -> int:
    return sum(1 for char in text if predicate(char))


def count_vowels(text: str) -> int:
    """Count characters from the fixed set ``aeiouAEIOU``."""

    return count_matching(text, is_vowel)


def count_consonants(text: str) -> int:
    """Count letters (any script) that are not in the vowel set."""

    return count_matching(text, is_consonant)


def count_digits(text: str) -> int:
    return count_matching(text, is_digit)


def count_uppercase(text: str) -> int:
    return count_matching(text, is_upper)


def count_lowercase(text: str) -> int:
    return count_matching(text, is_lower)


def count_whitespace(text: str) -> int:
    return count_matching(text, is_whitespace)


def count_punctuation(text: str) -> int:
    return count_matching(text, is_punctuation)
