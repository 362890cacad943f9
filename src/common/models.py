"""Data models shared across UI, core operations, and configuration."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Literal, Optional

OperationKind = Literal["encode", "decode", "metric", "transform", "digest"]
OutputFormat = Literal["text", "json"]


@dataclass(slots=True)
class GlobalSettings:
    """Process-wide settings shared by every profile."""

    encoding: str = "utf-8"
    error_policy: str = "fail-fast"
    log_level: str = "WARNING"


@dataclass(slots=True)
class ProfileSettings:
    """Named tuning profile for codecs and CLI behavior."""

    name: str = "default"
    description: str = ""
    compression_level: int = 9
    output_format: OutputFormat = "text"
    max_input_chars: Optional[int] = None
    shuffle_seed: Optional[int] = None


@dataclass(slots=True)
class RuntimeConfig:
    global_settings: GlobalSettings = field(default_factory=GlobalSettings)
    profile: ProfileSettings = field(default_factory=ProfileSettings)


@dataclass(slots=True)
class TextReport:
    """Every metric computed for a single input text."""

    characters: int = 0
    code_units: int = 0
    logical_length: int = 0
    words: int = 0
    sentences: int = 0
    paragraphs: int = 0
    vowels: int = 0
    consonants: int = 0
    digits: int = 0
    uppercase: int = 0
    lowercase: int = 0
    whitespace: int = 0
    punctuation: int = 0
    most_frequent_character: str = ""
    least_frequent_character: str = ""
    most_frequent_word: str = ""
    least_frequent_word: str = ""

    @property
    def is_empty(self) -> bool:
        return self.characters == 0


@dataclass(frozen=True, slots=True)
class Operation:
    """Registry entry describing one named text operation."""

    name: str
    kind: OperationKind
    func: Callable[..., Any]
    description: str = ""
    inverse: Optional[str] = None
    options: tuple[str, ...] = ()

    @property
    def is_reversible(self) -> bool:
        return self.inverse is not None
