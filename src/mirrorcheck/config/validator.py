"""Config file validation for Mirrorcheck runs."""

from __future__ import annotations

import difflib
from pathlib import Path

import yaml

from mirrorcheck.config.loader import check_algorithm, check_encoding, check_pattern
from mirrorcheck.constants.config import CONFIG_FILENAME
from mirrorcheck.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
)
from mirrorcheck.exceptions import ConfigError
from mirrorcheck.exceptions.validation import ValidationError

_FIELD_ERROR_CODES: dict[str, str] = {"include_pattern": CFG006, "algorithm": CFG007}


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a mirrorcheck.yaml file and return all validation errors.

    This is the collect-all entry point used by both ``mirrorcheck validate-config``
    and ``mirrorcheck verify`` preflight. It never raises; all problems are
    returned as :class:`ValidationError` instances.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(ValidationError(code=CFG002, path=path_str, field="", message=f"invalid YAML: {exc}"))
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(raw.keys(), key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=str(key),
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(str(key), ALLOWED_CONFIG_KEYS),
                )
            )
            continue

        value = raw[key]
        if value is None:
            continue
        if not isinstance(value, str):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=key,
                    message=f"`{key}` must be a string",
                    hint=f"got: {type(value).__name__}",
                )
            )
            continue

        try:
            if key == "include_pattern":
                check_pattern(value)
            elif key == "algorithm":
                check_algorithm(value)
            elif key == "manifest_encoding":
                check_encoding(value)
            elif not value.strip():
                raise ConfigError(f"`{key}` must be a non-empty string")
        except ConfigError as exc:
            errors.append(
                ValidationError(
                    code=_FIELD_ERROR_CODES.get(key, CFG005),
                    path=path_str,
                    field=key,
                    message=str(exc),
                )
            )

    return errors


def _suggest_key(key: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean' hint for a mistyped config key."""
    matches = difflib.get_close_matches(key, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
