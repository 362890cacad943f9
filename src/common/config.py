"""Helpers for loading runtime configuration profiles."""
from __future__ import annotations

import copy
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .errors import ErrorCode, StringityError
from .models import GlobalSettings, ProfileSettings, RuntimeConfig
from .versioning import CONFIG_DOCUMENT_VERSION

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/defaults.json")
DEFAULT_PROFILE = "default"
ALLOWED_ERROR_POLICIES = {"fail-fast", "strict", "replace"}
ALLOWED_OUTPUT_FORMATS = {"text", "json"}
ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

# Used when no explicit config is given and config/defaults.json is absent.
BUILTIN_CONFIG: Dict[str, Any] = {
    "version": CONFIG_DOCUMENT_VERSION,
    "global": {
        "encoding": "utf-8",
        "error_policy": "fail-fast",
        "log_level": "WARNING",
    },
    "profiles": {
        "default": {
            "description": "Balanced defaults for interactive use",
            "compression_level": 9,
            "output_format": "text",
            "max_input_chars": 1_000_000,
            "shuffle_seed": None,
        },
    },
}


@dataclass(slots=True)
class ConfigDocument:
    source: Path
    version: int
    global_settings: GlobalSettings
    profiles: Dict[str, ProfileSettings]


def load_runtime_config(
    profile: str = DEFAULT_PROFILE,
    *,
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Dict[str, Any]]] = None,
) -> RuntimeConfig:
    """Load configuration JSON, validate it, and resolve a specific profile."""

    document = load_config_document(
        profile_name=profile,
        config_path=config_path,
        overrides=overrides,
    )
    logger.debug("Resolved profile '%s' from %s", profile, document.source)
    return RuntimeConfig(global_settings=document.global_settings, profile=document.profiles[profile])


def load_config_document(
    *,
    profile_name: Optional[str] = None,
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Dict[str, Any]]] = None,
) -> ConfigDocument:
    cfg_path, raw = _read_config_source(config_path)

    version = _require_positive_int(raw.get("version"), "version", cfg_path)
    if version > CONFIG_DOCUMENT_VERSION:
        raise StringityError(
            ErrorCode.CONFIG_ERROR,
            f"Config version {version} in {cfg_path} is newer than supported ({CONFIG_DOCUMENT_VERSION})",
        )
    global_section = raw.get("global")
    if not isinstance(global_section, Mapping):
        raise StringityError(ErrorCode.CONFIG_ERROR, f"'global' section missing in {cfg_path}")

    overrides = overrides or {}
    global_data = {**global_section, **(overrides.get("global") or {})}
    global_settings = _build_global_settings(global_data, cfg_path)

    profiles_section = raw.get("profiles")
    if not isinstance(profiles_section, Mapping) or not profiles_section:
        raise StringityError(ErrorCode.CONFIG_ERROR, f"'profiles' section missing in {cfg_path}")

    profile_overrides = overrides.get("profile") or {}
    profiles: Dict[str, ProfileSettings] = {}
    for name, profile_data in profiles_section.items():
        if not isinstance(profile_data, Mapping):
            raise StringityError(
                ErrorCode.CONFIG_ERROR,
                f"Profile '{name}' must be an object in {cfg_path}",
            )
        merged = dict(profile_data)
        if profile_name and name == profile_name and profile_overrides:
            merged = {**merged, **profile_overrides}
        profiles[name] = _build_profile_settings(name, merged, cfg_path)

    if profile_name and profile_name not in profiles:
        raise StringityError(
            ErrorCode.CONFIG_ERROR,
            f"Profile '{profile_name}' not found in {cfg_path}",
            context={"available": sorted(profiles)},
        )

    return ConfigDocument(
        source=cfg_path,
        version=version,
        global_settings=global_settings,
        profiles=profiles,
    )


def check_input_limit(text: str, profile: ProfileSettings) -> None:
    """Raise ``INPUT_ERROR`` when ``text`` exceeds the profile's ``max_input_chars``."""

    limit = profile.max_input_chars
    if limit is not None and len(text) > limit:
        raise StringityError(
            ErrorCode.INPUT_ERROR,
            f"Input has {len(text)} characters; profile '{profile.name}' allows {limit}",
            context={"limit": limit, "length": len(text)},
        )


def error_mode_from_policy(policy: str) -> str:
    """Translate human-friendly error policy into Python's encoding error handler."""

    return "strict" if policy.lower() in {"fail-fast", "strict"} else "replace"


# ---------------------------------------------------------------------------
# Internal helpers


def _read_config_source(config_path: Optional[Path]) -> tuple[Path, Dict[str, Any]]:
    if config_path is not None:
        return config_path, _read_config_json(config_path)
    if DEFAULT_CONFIG_PATH.exists():
        return DEFAULT_CONFIG_PATH, _read_config_json(DEFAULT_CONFIG_PATH)
    return Path("<builtin>"), copy.deepcopy(BUILTIN_CONFIG)


def _read_config_json(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError as exc:
        raise StringityError(ErrorCode.CONFIG_ERROR, f"Config file '{path}' not found") from exc
    except json.JSONDecodeError as exc:
        raise StringityError(ErrorCode.CONFIG_ERROR, f"Config file '{path}' is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise StringityError(ErrorCode.CONFIG_ERROR, f"Config file '{path}' must contain a JSON object")
    return data


def _build_global_settings(data: Mapping[str, Any], source: Path) -> GlobalSettings:
    defaults = GlobalSettings()
    encoding = _require_string(data.get("encoding", defaults.encoding), "global.encoding", source)
    error_policy = _normalize_error_policy(data.get("error_policy", defaults.error_policy), source)
    log_level = _require_string(data.get("log_level", defaults.log_level), "global.log_level", source).upper()
    if log_level not in ALLOWED_LOG_LEVELS:
        allowed = ", ".join(sorted(ALLOWED_LOG_LEVELS))
        raise StringityError(
            ErrorCode.CONFIG_ERROR,
            f"Unsupported log_level '{log_level}' in {source}. Allowed: {allowed}",
        )
    return GlobalSettings(encoding=encoding, error_policy=error_policy, log_level=log_level)


def _build_profile_settings(name: str, data: Mapping[str, Any], source: Path) -> ProfileSettings:
    prefix = f"profiles.{name}"
    required_fields = ("description", "compression_level")
    missing = [field for field in required_fields if field not in data]
    if missing:
        raise StringityError(
            ErrorCode.CONFIG_ERROR,
            f"Profile '{name}' missing fields {missing} in {source}",
        )

    description = _require_string(data.get("description"), f"{prefix}.description", source)
    compression_level = _optional_int(data.get("compression_level"), f"{prefix}.compression_level", source)
    if compression_level is None or not 0 <= compression_level <= 9:
        raise StringityError(
            ErrorCode.CONFIG_ERROR,
            f"{prefix}.compression_level must be between 0 and 9 in {source}",
        )
    output_format = _require_string(data.get("output_format", "text"), f"{prefix}.output_format", source).lower()
    if output_format not in ALLOWED_OUTPUT_FORMATS:
        allowed = ", ".join(sorted(ALLOWED_OUTPUT_FORMATS))
        raise StringityError(
            ErrorCode.CONFIG_ERROR,
            f"Unsupported {prefix}.output_format '{output_format}' in {source}. Allowed: {allowed}",
        )
    max_input_chars = _optional_positive_int(data.get("max_input_chars"), f"{prefix}.max_input_chars", source)
    shuffle_seed = _optional_int(data.get("shuffle_seed"), f"{prefix}.shuffle_seed", source)

    return ProfileSettings(
        name=name,
        description=description,
        compression_level=compression_level,
        output_format=output_format,
        max_input_chars=max_input_chars,
        shuffle_seed=shuffle_seed,
    )


def _normalize_error_policy(value: Any, source: Path) -> str:
    policy = _require_string(value, "global.error_policy", source).lower()
    if policy not in ALLOWED_ERROR_POLICIES:
        allowed = ", ".join(sorted(ALLOWED_ERROR_POLICIES))
        raise StringityError(
            ErrorCode.CONFIG_ERROR,
            f"Unsupported error_policy '{value}' in {source}. Allowed: {allowed}",
        )
    return "fail-fast" if policy in {"fail-fast", "strict"} else "replace"


def _require_string(value: Any, field: str, source: Path) -> str:
    if not isinstance(value, str):
        raise StringityError(ErrorCode.CONFIG_ERROR, f"{field} must be a string in {source}")
    text = value.strip()
    if not text:
        raise StringityError(ErrorCode.CONFIG_ERROR, f"{field} must be non-empty in {source}")
    return text


def _optional_int(value: Any, field: str, source: Path) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise StringityError(ErrorCode.CONFIG_ERROR, f"{field} must be an integer in {source}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise StringityError(
            ErrorCode.CONFIG_ERROR,
            f"{field} must be an integer in {source}",
        ) from exc


def _require_positive_int(value: Any, field: str, source: Path) -> int:
    num = _optional_int(value, field, source)
    if num is None:
        raise StringityError(ErrorCode.CONFIG_ERROR, f"{field} must be an integer in {source}")
    if num <= 0:
        raise StringityError(
            ErrorCode.CONFIG_ERROR,
            f"{field} must be greater than zero in {source}",
        )
    return num


def _optional_positive_int(value: Any, field: str, source: Path) -> Optional[int]:
    if value is None:
        return None
    return _require_positive_int(value, field, source)
