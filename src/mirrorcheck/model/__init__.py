"""Core data models for Mirrorcheck."""

from .entities import FileOutcome, VerifyResult

__all__ = [
    "FileOutcome",
    "VerifyResult",
]
