"""Character removal filters."""
from __future__ import annotations

import re

_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]")
_NON_ASCII = re.compile(r"[^\x00-\x7F]")
_DIGITS = re.compile(r"\d")
_LETTERS = re.compile(r"[a-zA-Z]")
_SPECIAL = re.compile(r"[^a-zA-Z0-9\s]")


def remove_non_alphanumeric(text: str) -> str:
    return _strip(_NON_ALPHANUMERIC, text)


def remove_non_ascii(text: str) -> str:
    return _strip(_NON_ASCII, text)


def remove_digits(text: str) -> str:
    """Remove every decimal digit, including non-ASCII digits."""

    return _strip(_DIGITS, text)


def remove_letters(text: str) -> str:
    """Remove ASCII letters only."""

    return _strip(_LETTERS, text)


def remove_special_characters(text: str) -> str:
    """Keep ASCII letters, digits and whitespace."""

    return _strip(_SPECIAL, text)


def _strip(pattern: re.Pattern[str], text: str) -> str:
    # Blank input is returned untouched.
    if not text or text.isspace():
        return text
    return pattern.sub("", text)
