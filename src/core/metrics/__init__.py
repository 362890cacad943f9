"""Text metrics: counters, segmentation, frequency analysis, lengths."""

from .counters import (
    count_consonants,
    count_digits,
    count_lowercase,
    count_punctuation,
    count_uppercase,
    count_vowels,
    count_whitespace,
)
from .frequency import (
    character_frequencies,
    least_frequent_character,
    least_frequent_word,
    most_frequent_character,
    most_frequent_word,
    word_frequencies,
)
from .length import count_characters, count_code_units, get_length, logical_length
from .report import build_text_report
from .segmentation import count_paragraphs, count_sentences, count_words

__all__ = [
    "build_text_report",
    "character_frequencies",
    "count_characters",
    "count_code_units",
    "count_consonants",
    "count_digits",
    "count_lowercase",
    "count_paragraphs",
    "count_punctuation",
    "count_sentences",
    "count_uppercase",
    "count_vowels",
    "count_whitespace",
    "count_words",
    "get_length",
    "least_frequent_character",
    "least_frequent_word",
    "logical_length",
    "most_frequent_character",
    "most_frequent_word",
    "word_frequencies",
]
