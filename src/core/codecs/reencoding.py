"""Round trips through fixed byte encodings.

Each helper encodes and immediately decodes with Python's ``replace`` loss
policy. Conforming text comes back unchanged; anything the encoding cannot
represent (non-ASCII under ASCII, unpaired surrogates under the UTF family)
comes back as ``?``.
"""
from __future__ import annotations

import hashlib

ASCII = "ascii"
UTF8 = "utf-8"
UTF16_LE = "utf-16-le"
UTF16_BE = "utf-16-be"
UTF32_LE = "utf-32-le"


def reencode(text: str, encoding: str) -> str:
    return text.encode(encoding, errors="replace").decode(encoding, errors="replace")


def to_ascii(text: str) -> str:
    return reencode(text, ASCII)


def to_utf8(text: str) -> str:
    return reencode(text, UTF8)


def to_unicode(text: str) -> str:
    """Little-endian UTF-16, the platform "Unicode" wide encoding."""

    return reencode(text, UTF16_LE)


def to_utf16(text: str) -> str:
    """Big-endian UTF-16."""

    return reencode(text, UTF16_BE)


def to_utf32(text: str) -> str:
    return reencode(text, UTF32_LE)


def to_sha256(text: str) -> str:
    """One-way digest: 64 lowercase hex characters over the UTF-8 bytes."""

    return hashlib.sha256(text.encode(UTF8, errors="replace")).hexdigest()
