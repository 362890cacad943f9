"""Shared error codes and exceptions for text operations."""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    MALFORMED_INPUT = "MALFORMED_INPUT"
    CONFIG_ERROR = "CONFIG_ERROR"
    UNKNOWN_OPERATION = "UNKNOWN_OPERATION"
    INPUT_ERROR = "INPUT_ERROR"


class StringityError(RuntimeError):
    """Exception carrying a structured error code for CLI/library callers."""

    def __init__(self, code: ErrorCode, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        base = super().__str__()
        return f"[{self.code.value}] {base}" if base else self.code.value


class DecodeError(StringityError):
    """Raised when a codec cannot decode its representation."""

    def __init__(self, codec: str, reason: str) -> None:
        super().__init__(
            ErrorCode.MALFORMED_INPUT,
            f"Cannot decode {codec}: {reason}",
            context={"codec": codec, "reason": reason},
        )
        self.codec = codec
