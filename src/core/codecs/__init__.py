"""Reversible text codecs and fixed-encoding round trips."""

from .compression import compress, decompress
from .morse import MORSE_ALPHABET, MORSE_DECODE, from_morse, to_morse
from .radix import from_binary, from_hex, to_binary, to_hex
from .reencoding import to_ascii, to_sha256, to_unicode, to_utf8, to_utf16, to_utf32
from .rot13 import from_rot13, to_rot13

__all__ = [
    "MORSE_ALPHABET",
    "MORSE_DECODE",
    "compress",
    "decompress",
    "from_binary",
    "from_hex",
    "from_morse",
    "from_rot13",
    "to_ascii",
    "to_binary",
    "to_hex",
    "to_morse",
    "to_rot13",
    "to_sha256",
    "to_unicode",
    "to_utf8",
    "to_utf16",
    "to_utf32",
]
