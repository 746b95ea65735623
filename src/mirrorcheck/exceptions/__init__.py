"""Shared exception hierarchy for Mirrorcheck."""

from __future__ import annotations

from .base import MirrorCheckError
from .cache import CacheError
from .config import ConfigError
from .manifest import ManifestError

__all__ = [
    "CacheError",
    "ConfigError",
    "ManifestError",
    "MirrorCheckError",
]
