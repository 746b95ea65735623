"""Stable validation error codes and allowed-key sets for config validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown top-level key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # invalid regular expression
CFG007: str = "CFG007"  # unsupported digest algorithm
CFG008: str = "CFG008"  # root directory not found

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "algorithm",
        "cache",
        "include_pattern",
        "index_suffix",
        "manifest",
        "manifest_encoding",
    }
)
