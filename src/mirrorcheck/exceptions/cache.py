"""Cache-related exceptions."""

from __future__ import annotations

from mirrorcheck.exceptions.base import MirrorCheckError


class CacheError(MirrorCheckError):
    """Raised when an existing fingerprint cache cannot be read or decoded."""
