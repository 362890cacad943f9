"""International Morse code for A-Z and 0-9."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

MORSE_ALPHABET: Mapping[str, str] = MappingProxyType(
    {
        "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".",
        "F": "..-.", "G": "--.", "H": "....", "I": "..", "J": ".---",
        "K": "-.-", "L": ".-..", "M": "--", "N": "-.", "O": "---",
        "P": ".--.", "Q": "--.-", "R": ".-.", "S": "...", "T": "-",
        "U": "..-", "V": "...-", "W": ".--", "X": "-..-", "Y": "-.--",
        "Z": "--..", "1": ".----", "2": "..---", "3": "...--", "4": "....-",
        "5": ".....", "6": "-....", "7": "--...", "8": "---..", "9": "----.",
        "0": "-----",
    }
)

# Derived from MORSE_ALPHABET.
MORSE_DECODE: Mapping[str, str] = MappingProxyType({token: symbol for symbol, token in MORSE_ALPHABET.items()})


def to_morse(text: str) -> str:
    """Encode letters and digits; every other character is dropped silently."""

    tokens = (MORSE_ALPHABET.get(char.upper()) for char in text)
    return " ".join(token for token in tokens if token)


def from_morse(morse_text: str) -> str:
    """Decode space-separated tokens; unknown tokens are dropped silently."""

    return "".join(MORSE_DECODE.get(token, "") for token in morse_text.split(" "))
