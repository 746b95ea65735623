"""Root exception type."""

from __future__ import annotations


class MirrorCheckError(Exception):
    """Base class for all Mirrorcheck errors."""
