"""Aggregate every text metric into a single TextReport."""
from __future__ import annotations

from common.models import TextReport

from .counters import (
    count_consonants,
    count_digits,
    count_lowercase,
    count_punctuation,
    count_uppercase,
    count_vowels,
    count_whitespace,
)
from .frequency import character_frequencies, least_frequent, most_frequent, word_frequencies
from .length import count_characters, count_code_units, logical_length
from .segmentation import count_paragraphs, count_sentences, count_words


def build_text_report(text: str) -> TextReport:
    """Profile ``text``; the frequency tables are built once and shared."""

    characters = character_frequencies(text)
    words = word_frequencies(text)
    return TextReport(
        characters=count_characters(text),
        code_units=count_code_units(text),
        logical_length=logical_length(text),
        words=count_words(text),
        sentences=count_sentences(text),
        paragraphs=count_paragraphs(text),
        vowels=count_vowels(text),
        consonants=count_consonants(text),
        digits=count_digits(text),
        uppercase=count_uppercase(text),
        lowercase=count_lowercase(text),
        whitespace=count_whitespace(text),
        punctuation=count_punctuation(text),
        most_frequent_character=most_frequent(characters),
        least_frequent_character=least_frequent(characters),
        most_frequent_word=most_frequent(words),
        least_frequent_word=least_frequent(words),
    )
