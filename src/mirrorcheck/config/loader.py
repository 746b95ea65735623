"""Config loading and normalization for Mirrorcheck runs."""

from __future__ import annotations

import codecs
import hashlib
import re
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from mirrorcheck.config.model import MirrorCheckConfig
from mirrorcheck.constants.config import CONFIG_FILENAME, UNSUPPORTED_ALGORITHMS
from mirrorcheck.constants.validation import ALLOWED_CONFIG_KEYS
from mirrorcheck.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> MirrorCheckConfig:
    """Load and validate verifier config from ``mirrorcheck.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return MirrorCheckConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s) in {path}: {', '.join(unknown)}")

    values = {key: _ensure_string(value, key) for key, value in raw.items() if value is not None}
    return apply_overrides(MirrorCheckConfig(), **values)


def apply_overrides(config: MirrorCheckConfig, **overrides: str | None) -> MirrorCheckConfig:
    """Return *config* with every non-``None`` override applied and validated."""
    values = {key: value for key, value in overrides.items() if value is not None}
    if not values:
        return config

    unknown = sorted(set(values) - ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config option(s): {', '.join(unknown)}")

    if "include_pattern" in values:
        check_pattern(values["include_pattern"])
    if "algorithm" in values:
        values["algorithm"] = check_algorithm(values["algorithm"])
    if "manifest_encoding" in values:
        check_encoding(values["manifest_encoding"])
    for key in ("manifest", "cache", "index_suffix"):
        if key in values and not values[key].strip():
            raise ConfigError(f"{key} must be a non-empty string")

    return replace(config, **values)


def check_pattern(pattern: str) -> None:
    """Raise ``ConfigError`` when *pattern* is not a valid regular expression."""
    try:
        re.compile(pattern)
    except re.error as exc:
        raise ConfigError(f"include_pattern is not a valid regular expression: {exc}") from exc


def check_algorithm(algorithm: str) -> str:
    """Return the normalized digest name or raise ``ConfigError``."""
    name = algorithm.strip().lower()
    if name in UNSUPPORTED_ALGORITHMS or name not in hashlib.algorithms_available:
        raise ConfigError(f"algorithm {algorithm!r} is not a supported fixed-length digest")
    return name


def check_encoding(encoding: str) -> None:
    """Raise ``ConfigError`` when *encoding* is not a known text codec."""
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise ConfigError(f"manifest_encoding {encoding!r} is not a known codec") from exc


def _ensure_string(value: Any, key_name: str) -> str:
    """Return *value* when it is a string, raising ConfigError otherwise."""
    if not isinstance(value, str):
        raise ConfigError(f"{key_name} must be a string")
    return value
