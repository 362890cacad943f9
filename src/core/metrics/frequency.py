"""Most/least frequent characters and words with first-seen tie-breaking."""
from __future__ import annotations

from collections import Counter
from typing import Iterable

from common.text import is_letter_or_digit

from .segmentation import split_tokens


def build_frequency_table(items: Iterable[str]) -> Counter[str]:
    """Count items; iteration order of the table is first-seen order."""

    return Counter(items)


def character_frequencies(text: str) -> Counter[str]:
    """Letters and digits only; everything else is excluded."""

    return build_frequency_table(char for char in text if is_letter_or_digit(char))


def word_frequencies(text: str) -> Counter[str]:
    """Case-sensitive exact tokens split on whitespace and ``. , ! ?``."""

    return build_frequency_table(split_tokens(text))


def most_frequent(table: Counter[str]) -> str:
    """Highest count wins; among equal counts the earliest-seen key wins."""

    best_key = ""
    best_count = 0
    for key, count in table.items():
        if count > best_count:
            best_key, best_count = key, count
    return best_key


def least_frequent(table: Counter[str]) -> str:
    """Lowest count wins; among equal counts the earliest-seen key wins."""

    best_key = ""
    best_count = 0
    for key, count in table.items():
        if not best_count or count < best_count:
            best_key, best_count = key, count
    return best_key


def most_frequent_character(text: str) -> str:
    return most_frequent(character_frequencies(text))


def least_frequent_character(text: str) -> str:
    return least_frequent(character_frequencies(text))


def most_frequent_word(text: str) -> str:
    return most_frequent(word_frequencies(text))


def least_frequent_word(text: str) -> str:
    return least_frequent(word_frequencies(text))
