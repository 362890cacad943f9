"""Hexadecimal and binary renderings of text."""
from __future__ import annotations

import logging
import re

from common.errors import DecodeError

logger = logging.getLogger(__name__)

_HEX_PATTERN = re.compile(r"[0-9A-Fa-f]*")
_BYTE_TOKEN_PATTERN = re.compile(r"[01]{8}")


def to_hex(text: str) -> str:
    """Render the UTF-8 bytes of ``text`` as uppercase hex pairs without separators."""

    return text.encode("utf-8", errors="replace").hex().upper()


def from_hex(hex_text: str) -> str:
    """Decode two hex digits per byte and interpret the bytes as UTF-8."""

    if len(hex_text) % 2:
        raise _decode_failure("hex", f"odd number of digits ({len(hex_text)})")
    if not _HEX_PATTERN.fullmatch(hex_text):
        raise _decode_failure("hex", "non-hexadecimal character in input")
    data = bytes.fromhex(hex_text)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise _decode_failure("hex", f"bytes are not valid UTF-8 at offset {exc.start}") from exc


def to_binary(text: str) -> str:
    """Render each code point as a zero-padded 8-bit binary token, space separated.

    Code points above U+00FF produce tokens longer than 8 bits, which
    :func:`from_binary` rejects; keep input in the ASCII range for a round trip.
    """

    return " ".join(format(ord(char), "08b") for char in text)


def from_binary(binary_text: str) -> str:
    if not binary_text:
        return ""
    tokens = binary_text.split(" ")
    for position, token in enumerate(tokens):
        if not _BYTE_TOKEN_PATTERN.fullmatch(token):
            raise _decode_failure("binary", f"token {position} ({token!r}) is not an 8-bit binary literal")
    # ASCII reconstruction: bytes outside 0-127 become '?'.
    return "".join(chr(value) if value < 0x80 else "?" for value in (int(token, 2) for token in tokens))


def _decode_failure(codec: str, reason: str) -> DecodeError:
    logger.debug("%s decode rejected: %s", codec, reason)
    return DecodeError(codec, reason)
