"""Unicode character classification shared by metrics and transforms."""
from __future__ import annotations

import unicodedata

VOWELS = frozenset("aeiouAEIOU")

# Control characters treated as whitespace in addition to the Z* categories.
_CONTROL_WHITESPACE = frozenset("\t\n\v\f\r\x85")


def is_letter(char: str) -> bool:
    return unicodedata.category(char).startswith("L")


def is_digit(char: str) -> bool:
    """Decimal digits only (category Nd); superscripts and fractions do not count."""

    return unicodedata.category(char) == "Nd"


def is_letter_or_digit(char: str) -> bool:
    return is_letter(char) or is_digit(char)


def is_upper(char: str) -> bool:
    return unicodedata.category(char) == "Lu"


def is_lower(char: str) -> bool:
    return unicodedata.category(char) == "Ll"


def is_punctuation(char: str) -> bool:
    return unicodedata.category(char).startswith("P")


def is_whitespace(char: str) -> bool:
    if char in _CONTROL_WHITESPACE:
        return True
    return unicodedata.category(char) in {"Zs", "Zl", "Zp"}


def is_vowel(char: str) -> bool:
    return char in VOWELS


def is_consonant(char: str) -> bool:
    return is_letter(char) and char not in VOWELS


def upper_char(char: str) -> str:
    """Upper-case a single character, keeping it unchanged when the mapping expands."""

    mapped = char.upper()
    return mapped if len(mapped) == 1 else char


def lower_char(char: str) -> str:
    mapped = char.lower()
    return mapped if len(mapped) == 1 else char
