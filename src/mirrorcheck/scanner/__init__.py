"""Verification orchestration package."""

from __future__ import annotations

from typing import Any

__all__ = ["reconcile", "verify_mirror"]


def __getattr__(name: str) -> Any:
    """Lazily expose scanner APIs to avoid import cycles at package import time."""
    if name in __all__:
        from . import reconciler

        return getattr(reconciler, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
