"""Tests for config loading and overrides."""

from __future__ import annotations

from pathlib import Path

import pytest

from mirrorcheck.config import MirrorCheckConfig, apply_overrides, load_config
from mirrorcheck.constants.config import DEFAULT_INCLUDE_PATTERN
from mirrorcheck.exceptions import ConfigError


def test_defaults_when_no_config_file(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config == MirrorCheckConfig()
    assert config.include_pattern == DEFAULT_INCLUDE_PATTERN
    assert config.include.search("fb2-000024-030559.zip")
    assert config.include.search("fb2-000024-030559_lost.zip")
    assert config.include.search("librusec_local_fb2.inpx")
    assert not config.include.search("fb2-000024.zip")


def test_loads_values_from_mirrorcheck_yaml(tmp_path: Path) -> None:
    (tmp_path / "mirrorcheck.yaml").write_text(
        "manifest: lists/all.md5\ncache: /var/cache/mc.json\ninclude_pattern: '\\.zip$'\nalgorithm: SHA256\n",
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.manifest_path(tmp_path) == (tmp_path / "lists" / "all.md5").resolve()
    assert config.cache_path(tmp_path) == Path("/var/cache/mc.json").resolve()
    assert config.include_pattern == "\\.zip$"
    assert config.algorithm == "sha256"


def test_explicit_missing_config_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(tmp_path, tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("manifest: [unclosed", "Invalid YAML"),
        ("- a\n- b\n", "must be a YAML mapping"),
        ("manifest: 3\n", "manifest must be a string"),
        ("manfest: x.md5\n", "Unknown config key"),
        ("include_pattern: '('\n", "not a valid regular expression"),
        ("algorithm: shake_128\n", "not a supported fixed-length digest"),
        ("algorithm: nosuchhash\n", "not a supported fixed-length digest"),
        ("manifest_encoding: klingon\n", "not a known codec"),
        ("index_suffix: '  '\n", "must be a non-empty string"),
    ],
)
def test_invalid_config_raises(tmp_path: Path, content: str, message: str) -> None:
    (tmp_path / "mirrorcheck.yaml").write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError, match=message):
        load_config(tmp_path)


def test_empty_config_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / "mirrorcheck.yaml").write_text("", encoding="utf-8")

    assert load_config(tmp_path) == MirrorCheckConfig()


def test_overrides_skip_none_and_validate() -> None:
    base = MirrorCheckConfig()

    assert apply_overrides(base, manifest=None, cache=None) is base
    assert apply_overrides(base, include_pattern=r"\.zip$").include_pattern == r"\.zip$"
    with pytest.raises(ConfigError):
        apply_overrides(base, include_pattern="[")
