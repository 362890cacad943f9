"""gzip + base64 packing of text.

The text is serialized as UTF-16LE (two bytes per code unit), compressed with
gzip and wrapped in standard base64 with padding. The gzip header carries a
zero timestamp so equal inputs always produce equal payloads.
"""
from __future__ import annotations

import base64
import binascii
import gzip
import logging
import zlib

from common.errors import DecodeError

logger = logging.getLogger(__name__)

WIDE_ENCODING = "utf-16-le"
DEFAULT_COMPRESSION_LEVEL = 9


def compress(text: str, *, level: int = DEFAULT_COMPRESSION_LEVEL) -> str:
    if not 0 <= level <= 9:
        raise ValueError(f"compression level must be between 0 and 9, got {level}")
    raw = text.encode(WIDE_ENCODING, errors="replace")
    packed = gzip.compress(raw, compresslevel=level, mtime=0)
    return base64.b64encode(packed).decode("ascii")


def decompress(payload: str) -> str:
    try:
        packed = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        logger.debug("compress payload rejected: %s", exc)
        raise DecodeError("compress", f"payload is not valid base64 ({exc})") from exc
    try:
        raw = gzip.decompress(packed)
    except (OSError, EOFError, zlib.error) as exc:
        logger.debug("compress stream rejected: %s", exc)
        raise DecodeError("compress", f"corrupt gzip stream ({exc})") from exc
    try:
        return raw.decode(WIDE_ENCODING)
    except UnicodeDecodeError as exc:
        raise DecodeError("compress", f"decompressed bytes are not valid UTF-16LE ({exc.reason})") from exc
