"""Shared TextReport serialization helpers."""
from __future__ import annotations

from dataclasses import fields
from typing import Dict

from .errors import ErrorCode, StringityError
from .models import TextReport
from .versioning import LEGACY_TEXT_REPORT_FORMAT_VERSION, TEXT_REPORT_FORMAT_VERSION

_COUNT_FIELDS = tuple(f.name for f in fields(TextReport) if f.type in ("int", int))
_TEXT_FIELDS = tuple(f.name for f in fields(TextReport) if f.type in ("str", str))


def serialize_text_report(report: TextReport) -> Dict[str, object]:
    payload: Dict[str, object] = {"format_version": TEXT_REPORT_FORMAT_VERSION}
    payload["counts"] = {name: getattr(report, name) for name in _COUNT_FIELDS}
    payload["frequency"] = {name: getattr(report, name) for name in _TEXT_FIELDS}
    return payload


def deserialize_text_report(data: Dict[str, object]) -> TextReport:
    version = data.get("format_version", LEGACY_TEXT_REPORT_FORMAT_VERSION)
    if version not in {TEXT_REPORT_FORMAT_VERSION, LEGACY_TEXT_REPORT_FORMAT_VERSION}:
        raise StringityError(
            ErrorCode.INPUT_ERROR,
            f"Unsupported text report format_version '{version}'",
        )
    counts = data.get("counts") or {}
    frequency = data.get("frequency") or {}
    if not isinstance(counts, dict) or not isinstance(frequency, dict):
        raise StringityError(ErrorCode.INPUT_ERROR, "Text report sections must be objects")

    values: Dict[str, object] = {}
    for name in _COUNT_FIELDS:
        values[name] = int(counts.get(name, 0))
    for name in _TEXT_FIELDS:
        values[name] = str(frequency.get(name, ""))
    # 1.0.0 reports predate code unit counting.
    if version == LEGACY_TEXT_REPORT_FORMAT_VERSION and "code_units" not in counts:
        values["code_units"] = values["characters"]
    return TextReport(**values)


def format_text_report(report: TextReport) -> str:
    """Render a report as aligned ``name: value`` lines for terminals."""

    rows = [(name, str(getattr(report, name))) for name in _COUNT_FIELDS]
    rows.extend((name, repr(getattr(report, name))) for name in _TEXT_FIELDS)
    width = max(len(name) for name, _ in rows)
    return "\n".join(f"{name.replace('_', ' ').ljust(width)} : {value}" for name, value in rows)
