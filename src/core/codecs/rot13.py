"""ROT13 letter substitution (self-inverse)."""
from __future__ import annotations

import string

_LOWER = string.ascii_lowercase
_UPPER = string.ascii_uppercase
_ROT13_TABLE = str.maketrans(
    _LOWER + _UPPER,
    _LOWER[13:] + _LOWER[:13] + _UPPER[13:] + _UPPER[:13],
)


def to_rot13(text: str) -> str:
    return text.translate(_ROT13_TABLE)


from_rot13 = to_rot13
