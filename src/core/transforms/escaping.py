"""JSON string and XML entity escaping."""
from __future__ import annotations

_JSON_SHORT_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

_XML_ENTITIES = (
    ("&", "&amp;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
    ("<", "&lt;"),
    (">", "&gt;"),
)


def to_json_escaped(text: str) -> str:
    """Escape for a JSON string body; output is pure ASCII.

    Control characters and everything above U+007F become ``\\uXXXX``;
    astral code points are written as a surrogate pair.
    """

    if not text:
        return text
    parts = []
    for char in text:
        short = _JSON_SHORT_ESCAPES.get(char)
        if short is not None:
            parts.append(short)
            continue
        code = ord(char)
        if code < 0x20 or code > 0x7F:
            parts.append(_unicode_escape(code))
        else:
            parts.append(char)
    return "".join(parts)


def to_xml_escaped(text: str) -> str:
    if not text:
        return text
    for raw, entity in _XML_ENTITIES:
        text = text.replace(raw, entity)
    return text


def _unicode_escape(code: int) -> str:
    if code <= 0xFFFF:
        return f"\\u{code:04X}"
    offset = code - 0x10000
    high = 0xD800 + (offset >> 10)
    low = 0xDC00 + (offset & 0x3FF)
    return f"\\u{high:04X}\\u{low:04X}"
