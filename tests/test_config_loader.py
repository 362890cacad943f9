"""Tests for runtime configuration loader."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from common.config import (
    BUILTIN_CONFIG,
    error_mode_from_policy,
    load_config_document,
    load_runtime_config,
)
from common.errors import ErrorCode, StringityError
from core.codecs import compress, decompress

REPO_CONFIG = Path(__file__).resolve().parents[1] / "config" / "defaults.json"


def test_load_repository_profiles() -> None:
    document = load_config_document(config_path=REPO_CONFIG)
    assert set(document.profiles) == {"default", "fast", "reproducible"}
    assert document.profiles["fast"].compression_level == 1
    assert document.profiles["reproducible"].shuffle_seed == 1337
    assert document.profiles["reproducible"].output_format == "json"


def test_load_default_profile() -> None:
    config = load_runtime_config(config_path=REPO_CONFIG)
    assert config.profile.name == "default"
    assert config.profile.compression_level == 9
    assert config.profile.shuffle_seed is None
    assert config.global_settings.encoding == "utf-8"
    assert config.global_settings.error_policy == "fail-fast"


def test_builtin_config_used_when_defaults_file_absent(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    document = load_config_document()
    assert str(document.source) == "<builtin>"
    assert list(document.profiles) == ["default"]
    assert document.profiles["default"].max_input_chars == BUILTIN_CONFIG["profiles"]["default"]["max_input_chars"]


def test_error_mode_resolution() -> None:
    assert error_mode_from_policy("fail-fast") == "strict"
    assert error_mode_from_policy("strict") == "strict"
    assert error_mode_from_policy("replace") == "replace"


def test_overrides_apply_to_selected_profile(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, _document())
    config = load_runtime_config(
        "only",
        config_path=config_path,
        overrides={"global": {"log_level": "debug"}, "profile": {"compression_level": 3}},
    )
    assert config.global_settings.log_level == "DEBUG"
    assert config.profile.compression_level == 3


def test_missing_profile_lists_available(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, _document())
    with pytest.raises(StringityError) as exc:
        load_runtime_config("missing", config_path=config_path)
    assert exc.value.code == ErrorCode.CONFIG_ERROR
    assert exc.value.context["available"] == ["only"]


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(StringityError) as exc:
        load_runtime_config(config_path=tmp_path / "absent.json")
    assert exc.value.code == ErrorCode.CONFIG_ERROR
    assert "not found" in str(exc.value)


def test_invalid_json_rejected(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(StringityError) as exc:
        load_runtime_config(config_path=path)
    assert "not valid JSON" in str(exc.value)


def test_newer_config_version_rejected(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, {**_document(), "version": 2})
    with pytest.raises(StringityError) as exc:
        load_runtime_config("only", config_path=config_path)
    assert "newer than supported" in str(exc.value)


def test_invalid_error_policy_rejected(tmp_path: Path) -> None:
    document = _document()
    document["global"]["error_policy"] = "panic"
    with pytest.raises(StringityError) as exc:
        load_runtime_config("only", config_path=_write_config(tmp_path, document))
    assert "error_policy" in str(exc.value)


@pytest.mark.parametrize(
    ("field", "value", "fragment"),
    [
        ("compression_level", 12, "between 0 and 9"),
        ("compression_level", -1, "between 0 and 9"),
        ("compression_level", None, "between 0 and 9"),
        ("output_format", "yaml", "output_format"),
        ("max_input_chars", -5, "greater than zero"),
        ("shuffle_seed", "abc", "must be an integer"),
        ("description", "  ", "non-empty"),
    ],
)
def test_invalid_profile_values_rejected(tmp_path: Path, field: str, value, fragment: str) -> None:
    document = _document()
    document["profiles"]["only"][field] = value
    with pytest.raises(StringityError) as exc:
        load_runtime_config("only", config_path=_write_config(tmp_path, document))
    assert exc.value.code == ErrorCode.CONFIG_ERROR
    assert fragment in str(exc.value)


def test_compression_level_zero_matches_codec_range(tmp_path: Path) -> None:
    document = _document()
    document["profiles"]["only"]["compression_level"] = 0
    config = load_runtime_config("only", config_path=_write_config(tmp_path, document))
    assert config.profile.compression_level == 0
    assert decompress(compress("stored", level=config.profile.compression_level)) == "stored"


def test_missing_required_profile_fields(tmp_path: Path) -> None:
    document = _document()
    del document["profiles"]["only"]["compression_level"]
    with pytest.raises(StringityError) as exc:
        load_runtime_config("only", config_path=_write_config(tmp_path, document))
    assert "compression_level" in str(exc.value)


def _document() -> dict:
    return {
        "version": 1,
        "global": {"encoding": "utf-8", "error_policy": "replace", "log_level": "WARNING"},
        "profiles": {
            "only": {
                "description": "Test profile",
                "compression_level": 6,
                "output_format": "text",
                "max_input_chars": 100,
                "shuffle_seed": 7,
            }
        },
    }


def _write_config(tmp_path: Path, payload: dict) -> Path:
    path = tmp_path / "config.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path
