"""Typed cache payload structures."""

from __future__ import annotations

from typing import TypedDict


class CachePayload(TypedDict):
    """Top-level cache payload persisted to disk."""

    version: int
    fingerprints: dict[str, str]
