"""Manifest-related exceptions."""

from __future__ import annotations

from mirrorcheck.exceptions.base import MirrorCheckError


class ManifestError(MirrorCheckError):
    """Raised when the manifest file cannot be read or decoded."""
