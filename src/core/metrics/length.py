"""Length measures: code points, UTF-16 code units, grapheme clusters."""
from __future__ import annotations

import regex

# Extended grapheme cluster (UAX #29).
_GRAPHEME_PATTERN = regex.compile(r"\X")


def count_characters(text: str) -> int:
    """Number of code points."""

    return len(text)


get_length = count_characters


def count_code_units(text: str) -> int:
    """Number of UTF-16 code units; astral code points count twice."""

    return len(text.encode("utf-16-le", errors="surrogatepass")) // 2


def logical_length(text: str) -> int:
    """Number of user-perceived characters (extended grapheme clusters).

    Expects NFC input; unnormalized input is segmented as-is and never raises.
    """

    return sum(1 for _ in _GRAPHEME_PATTERN.finditer(text))
