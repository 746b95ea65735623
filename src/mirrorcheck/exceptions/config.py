"""Configuration-related exceptions."""

from __future__ import annotations

from mirrorcheck.exceptions.base import MirrorCheckError


class ConfigError(MirrorCheckError, ValueError):
    """Raised when verifier configuration is invalid."""
