"""Tests for collect-all config validation and preflight."""

from __future__ import annotations

from pathlib import Path

from mirrorcheck.config import validate_config_file
from mirrorcheck.exceptions.validation import format_errors
from mirrorcheck.validation import preflight_validate


def _codes(errors) -> list[str]:
    return [error.code for error in errors]


def test_valid_config_has_no_errors(tmp_path: Path) -> None:
    (tmp_path / "mirrorcheck.yaml").write_text("manifest: a.md5\nalgorithm: md5\n", encoding="utf-8")

    assert validate_config_file(tmp_path) == []


def test_absent_implicit_config_is_fine(tmp_path: Path) -> None:
    assert validate_config_file(tmp_path) == []


def test_absent_explicit_config_is_reported(tmp_path: Path) -> None:
    errors = validate_config_file(tmp_path, tmp_path / "missing.yaml", config_explicit=True)

    assert _codes(errors) == ["CFG001"]


def test_collects_every_problem(tmp_path: Path) -> None:
    (tmp_path / "mirrorcheck.yaml").write_text(
        "manfest: a.md5\ncache: 1\ninclude_pattern: '('\nalgorithm: nope\n",
        encoding="utf-8",
    )

    errors = validate_config_file(tmp_path)

    assert sorted(_codes(errors)) == ["CFG004", "CFG005", "CFG006", "CFG007"]
    unknown = next(error for error in errors if error.code == "CFG004")
    assert unknown.hint == "did you mean `manifest`?"


def test_invalid_yaml_and_non_mapping(tmp_path: Path) -> None:
    config = tmp_path / "mirrorcheck.yaml"
    config.write_text("a: [", encoding="utf-8")
    assert _codes(validate_config_file(tmp_path)) == ["CFG002"]

    config.write_text("- 1\n", encoding="utf-8")
    assert _codes(validate_config_file(tmp_path)) == ["CFG003"]


def test_preflight_reports_missing_root(tmp_path: Path) -> None:
    errors = preflight_validate(tmp_path / "absent")

    assert _codes(errors) == ["CFG008"]
    assert "root directory does not exist" in format_errors(errors)
