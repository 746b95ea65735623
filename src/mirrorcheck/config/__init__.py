"""Configuration loading, validation, and normalization for Mirrorcheck runs.

This package facade re-exports all public names so that
``from mirrorcheck.config import ...`` statements stay short.
"""

from __future__ import annotations

from mirrorcheck.config.loader import apply_overrides, load_config
from mirrorcheck.config.model import MirrorCheckConfig
from mirrorcheck.config.validator import validate_config_file

__all__ = [
    "MirrorCheckConfig",
    "apply_overrides",
    "load_config",
    "validate_config_file",
]
