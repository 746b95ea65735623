"""Shared type aliases for Mirrorcheck."""

from .cache import CachePayload
from .common import FileStatus

__all__ = [
    "CachePayload",
    "FileStatus",
]
