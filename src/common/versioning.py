"""Centralized version constants for serialized artifacts."""
from __future__ import annotations

TEXT_REPORT_FORMAT_VERSION = "1.1.0"
LEGACY_TEXT_REPORT_FORMAT_VERSION = "1.0.0"

CONFIG_DOCUMENT_VERSION = 1
