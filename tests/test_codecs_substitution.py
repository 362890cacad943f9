"""Tests for Morse and ROT13 codecs."""
from __future__ import annotations

import pytest

from core.codecs import MORSE_ALPHABET, MORSE_DECODE, from_morse, from_rot13, to_morse, to_rot13


def test_morse_encodes_letters_and_digits() -> None:
    assert to_morse("SOS") == "... --- ..."
    assert to_morse("sos 2") == "... --- ... ..---"


def test_morse_drops_characters_outside_alphabet() -> None:
    assert to_morse("Hi, there!") == ".... .. - .... . .-. ."
    assert to_morse("ß?") == ""
    assert to_morse("") == ""


@pytest.mark.parametrize("text", ["Hello World 2024", "abc 123", "  spaced   out  "])
def test_morse_round_trip_keeps_alphabet_characters(text: str) -> None:
    expected = "".join(char for char in text.upper() if char in MORSE_ALPHABET)
    assert from_morse(to_morse(text.upper())) == expected


def test_morse_decode_skips_unknown_tokens() -> None:
    assert from_morse("... ??? ---") == "SO"
    assert from_morse("...  ---") == "SO"
    assert from_morse("") == ""


def test_morse_decode_table_is_exact_inverse() -> None:
    assert len(MORSE_ALPHABET) == 36
    assert len(MORSE_DECODE) == 36
    for symbol, token in MORSE_ALPHABET.items():
        assert MORSE_DECODE[token] == symbol


def test_morse_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        MORSE_ALPHABET["A"] = "-"  # type: ignore[index]
    with pytest.raises(TypeError):
        MORSE_DECODE["-"] = "A"  # type: ignore[index]


def test_rot13_shifts_ascii_letters_only() -> None:
    assert to_rot13("Hello, World!") == "Uryyb, Jbeyq!"
    assert to_rot13("123 ü") == "123 ü"


@pytest.mark.parametrize("text", ["", "Why did the chicken cross the road?", "naïve Ünïcode 123"])
def test_rot13_is_self_inverse(text: str) -> None:
    assert to_rot13(to_rot13(text)) == text
    assert from_rot13(to_rot13(text)) == text
