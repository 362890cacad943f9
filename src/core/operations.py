"""Flat registry of every named text operation.

The CLI and the workbench window dispatch through this module so that both
surfaces expose the same operation names and string results.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from common.errors import ErrorCode, StringityError
from common.models import Operation, OperationKind

from . import codecs, metrics, transforms

logger = logging.getLogger(__name__)


def _codec(name: str, func, inverse: str, description: str, *, options: Tuple[str, ...] = ()) -> Operation:
    kind: OperationKind = "encode" if name.startswith("to_") or name == "compress" else "decode"
    return Operation(name=name, kind=kind, func=func, description=description, inverse=inverse, options=options)


_REGISTRY: List[Operation] = [
    _codec("to_hex", codecs.to_hex, "from_hex", "UTF-8 bytes as uppercase hex pairs"),
    _codec("from_hex", codecs.from_hex, "to_hex", "Hex pairs back to UTF-8 text"),
    _codec("to_binary", codecs.to_binary, "from_binary", "8-bit binary per character, space separated"),
    _codec("from_binary", codecs.from_binary, "to_binary", "8-bit binary tokens back to ASCII text"),
    _codec("to_morse", codecs.to_morse, "from_morse", "Morse code for A-Z and 0-9 (lossy)"),
    _codec("from_morse", codecs.from_morse, "to_morse", "Morse tokens back to letters and digits"),
    _codec("to_rot13", codecs.to_rot13, "from_rot13", "ROT13 letter rotation"),
    _codec("from_rot13", codecs.from_rot13, "to_rot13", "ROT13 letter rotation (self-inverse)"),
    _codec("compress", codecs.compress, "decompress", "UTF-16LE + gzip + base64", options=("level",)),
    _codec("decompress", codecs.decompress, "compress", "Reverse of compress"),
    Operation("to_ascii", "transform", codecs.to_ascii, "Round trip through ASCII ('?' for the rest)"),
    Operation("to_utf8", "transform", codecs.to_utf8, "Round trip through UTF-8"),
    Operation("to_unicode", "transform", codecs.to_unicode, "Round trip through UTF-16LE"),
    Operation("to_utf16", "transform", codecs.to_utf16, "Round trip through UTF-16BE"),
    Operation("to_utf32", "transform", codecs.to_utf32, "Round trip through UTF-32LE"),
    Operation("to_sha256", "digest", codecs.to_sha256, "SHA-256 of the UTF-8 bytes, lowercase hex"),
    Operation("get_length", "metric", metrics.get_length, "Number of code points"),
    Operation("count_characters", "metric", metrics.count_characters, "Number of code points"),
    Operation("count_code_units", "metric", metrics.count_code_units, "Number of UTF-16 code units"),
    Operation("logical_length", "metric", metrics.logical_length, "Number of grapheme clusters"),
    Operation("count_words", "metric", metrics.count_words, "Words separated by spaces, tabs or line breaks"),
    Operation("count_sentences", "metric", metrics.count_sentences, "Segments between '.', '!' and '?'"),
    Operation("count_paragraphs", "metric", metrics.count_paragraphs, "Blocks separated by blank lines"),
    Operation("count_vowels", "metric", metrics.count_vowels, "Characters in 'aeiouAEIOU'"),
    Operation("count_consonants", "metric", metrics.count_consonants, "Letters that are not vowels"),
    Operation("count_digits", "metric", metrics.count_digits, "Decimal digits"),
    Operation("count_uppercase", "metric", metrics.count_uppercase, "Uppercase letters"),
    Operation("count_lowercase", "metric", metrics.count_lowercase, "Lowercase letters"),
    Operation("count_whitespace", "metric", metrics.count_whitespace, "Whitespace characters"),
    Operation("count_punctuation", "metric", metrics.count_punctuation, "Punctuation characters"),
    Operation("most_frequent_character", "metric", metrics.most_frequent_character, "Most common letter or digit"),
    Operation("least_frequent_character", "metric", metrics.least_frequent_character, "Least common letter or digit"),
    Operation("most_frequent_word", "metric", metrics.most_frequent_word, "Most common word"),
    Operation("least_frequent_word", "metric", metrics.least_frequent_word, "Least common word"),
    Operation("to_snake_case", "transform", transforms.to_snake_case, "snake_case"),
    Operation("to_kebab_case", "transform", transforms.to_kebab_case, "kebab-case"),
    Operation("to_camel_case", "transform", transforms.to_camel_case, "camelCase"),
    Operation("to_pascal_case", "transform", transforms.to_pascal_case, "PascalCase"),
    Operation("to_title_case", "transform", transforms.to_title_case, "Title Case"),
    Operation("swap_case", "transform", transforms.swap_case, "Swap upper and lower case letters"),
    Operation("to_sarcasm", "transform", transforms.to_sarcasm, "aLtErNaTiNg case"),
    Operation("reverse", "transform", transforms.reverse, "Reverse the text"),
    Operation("shuffle", "transform", transforms.shuffle, "Shuffle characters", options=("rng",)),
    Operation("remove_non_alphanumeric", "transform", transforms.remove_non_alphanumeric, "Keep [a-zA-Z0-9]"),
    Operation("remove_non_ascii", "transform", transforms.remove_non_ascii, "Drop characters above U+007F"),
    Operation("remove_digits", "transform", transforms.remove_digits, "Drop decimal digits"),
    Operation("remove_letters", "transform", transforms.remove_letters, "Drop ASCII letters"),
    Operation("remove_special_characters", "transform", transforms.remove_special_characters, "Keep letters, digits, whitespace"),
    Operation("to_json_escaped", "transform", transforms.to_json_escaped, "Escape for a JSON string"),
    Operation("to_xml_escaped", "transform", transforms.to_xml_escaped, "Escape XML special characters"),
]

OPERATIONS: Mapping[str, Operation] = MappingProxyType({operation.name: operation for operation in _REGISTRY})

CODEC_PAIRS: Mapping[str, Tuple[str, str]] = MappingProxyType(
    {
        "hex": ("to_hex", "from_hex"),
        "binary": ("to_binary", "from_binary"),
        "morse": ("to_morse", "from_morse"),
        "rot13": ("to_rot13", "from_rot13"),
        "compress": ("compress", "decompress"),
    }
)


def get_operation(name: str) -> Operation:
    try:
        return OPERATIONS[name]
    except KeyError as exc:
        raise StringityError(
            ErrorCode.UNKNOWN_OPERATION,
            f"Unknown operation '{name}'",
            context={"operation": name},
        ) from exc


def list_operations(kind: Optional[str] = None) -> List[str]:
    return sorted(name for name, operation in OPERATIONS.items() if kind is None or operation.kind == kind)


def codec_pair(name: str) -> Tuple[Operation, Operation]:
    """Return the ``(encode, decode)`` operations for a codec name such as ``hex``."""

    try:
        encode_name, decode_name = CODEC_PAIRS[name]
    except KeyError as exc:
        raise StringityError(
            ErrorCode.UNKNOWN_OPERATION,
            f"Unknown codec '{name}'. Available: {', '.join(sorted(CODEC_PAIRS))}",
            context={"codec": name},
        ) from exc
    return OPERATIONS[encode_name], OPERATIONS[decode_name]


def run_operation(name: str, text: str, *, options: Optional[Dict[str, Any]] = None) -> str:
    """Run ``name`` on ``text`` and return its result as a string.

    Options are forwarded only to operations that declare them; counts are
    rendered as decimal strings.
    """

    operation = get_operation(name)
    kwargs = {key: value for key, value in (options or {}).items() if key in operation.options and value is not None}
    logger.debug("Running %s on %d characters", name, len(text))
    result = operation.func(text, **kwargs)
    return result if isinstance(result, str) else str(result)


def roundtrip(codec: str, text: str, *, options: Optional[Dict[str, Any]] = None) -> Tuple[str, str]:
    """Encode then decode ``text`` with ``codec``; returns ``(encoded, decoded)``."""

    encoder, decoder = codec_pair(codec)
    encoded = run_operation(encoder.name, text, options=options)
    return encoded, run_operation(decoder.name, encoded, options=options)
