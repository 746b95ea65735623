"""Fingerprint cache loading and persistence.

The cache maps file identities to the last computed fingerprint. It is loaded
once per run and written back after every mutation, so an interrupted run
keeps every confirmed fingerprint. An unreadable or malformed cache is fatal:
silently starting over could hide a storage problem.
"""

from __future__ import annotations

import logging
from pathlib import Path

import jsonschema

from mirrorcheck.constants.cache import (
    CACHE_SCHEMA,
    CACHE_TEMP_PREFIX,
    CACHE_TEMP_SUFFIX,
    CACHE_VERSION,
    LEGACY_CACHE_KEY,
    LEGACY_CACHE_SCHEMA,
)
from mirrorcheck.constants.config import DEFAULT_INDEX_SUFFIX
from mirrorcheck.exceptions import CacheError
from mirrorcheck.io import load_json_file, write_json_atomic
from mirrorcheck.scanner.identity import file_identity, relative_to_root
from mirrorcheck.types import CachePayload

logger = logging.getLogger(__name__)


def new_cache() -> CachePayload:
    """Return an empty cache payload."""
    return {
        "version": CACHE_VERSION,
        "fingerprints": {},
    }


def load_cache(
    cache_path: Path,
    *,
    root: Path | None = None,
    index_suffix: str = DEFAULT_INDEX_SUFFIX,
) -> CachePayload:
    """Load the cache file, or return an empty payload when it does not exist.

    *root* and *index_suffix* are only used to rekey a legacy ``md5map`` cache.
    """
    if not cache_path.exists():
        logger.debug("No cache at %s; starting empty", cache_path)
        return new_cache()

    try:
        payload = load_json_file(cache_path)
    except OSError as exc:
        raise CacheError(f"Cannot read cache file {cache_path}: {exc}") from exc
    except ValueError as exc:
        raise CacheError(f"Cache file {cache_path} is not valid JSON: {exc}") from exc

    if isinstance(payload, dict) and "version" not in payload and LEGACY_CACHE_KEY in payload:
        return _migrate_legacy_payload(cache_path, payload, root=root, index_suffix=index_suffix)

    try:
        jsonschema.validate(instance=payload, schema=CACHE_SCHEMA)
    except jsonschema.ValidationError as exc:
        raise CacheError(f"Cache file {cache_path} has an unexpected structure: {exc.message}") from exc

    assert isinstance(payload, dict)
    fingerprints = dict(payload["fingerprints"])
    logger.debug("Loaded %d cached fingerprint(s) from %s", len(fingerprints), cache_path)
    return {
        "version": CACHE_VERSION,
        "fingerprints": fingerprints,
    }


def save_cache(cache_path: Path, payload: CachePayload) -> None:
    """Persist cache to disk atomically."""
    write_json_atomic(
        path=cache_path,
        payload=payload,
        temp_prefix=CACHE_TEMP_PREFIX,
        temp_suffix=CACHE_TEMP_SUFFIX,
    )


def _migrate_legacy_payload(
    cache_path: Path,
    payload: dict[str, object],
    *,
    root: Path | None,
    index_suffix: str,
) -> CachePayload:
    """Convert an ``md5map`` cache keyed by absolute paths.

    With *root* given, keys are rewritten to identities under that root and
    keys outside it are dropped, since they can never match a candidate.
    """
    try:
        jsonschema.validate(instance=payload, schema=LEGACY_CACHE_SCHEMA)
    except jsonschema.ValidationError as exc:
        raise CacheError(f"Legacy cache file {cache_path} has an unexpected structure: {exc.message}") from exc

    raw = payload[LEGACY_CACHE_KEY]
    assert isinstance(raw, dict)
    fingerprints: dict[str, str] = {}
    for key, value in raw.items():
        identity = str(key)
        if root is not None:
            relative = relative_to_root(root, identity.replace("\\", "/"))
            if relative is None:
                continue
            identity = file_identity(root, relative, index_suffix)
        fingerprints[identity] = str(value).lower()

    logger.info(
        "Migrated %d of %d fingerprint(s) from legacy cache %s",
        len(fingerprints),
        len(raw),
        cache_path,
    )
    return {
        "version": CACHE_VERSION,
        "fingerprints": fingerprints,
    }


class FingerprintCache:
    """Owned, persist-on-write view over a cache payload."""

    def __init__(self, path: Path, payload: CachePayload | None = None, *, persist: bool = True) -> None:
        self.path = path
        self.persist = persist
        self._payload = payload if payload is not None else new_cache()

    @classmethod
    def open(
        cls,
        path: Path,
        *,
        persist: bool = True,
        root: Path | None = None,
        index_suffix: str = DEFAULT_INDEX_SUFFIX,
    ) -> FingerprintCache:
        """Load the cache at *path*; with ``persist=False`` the file is never touched."""
        payload = load_cache(path, root=root, index_suffix=index_suffix) if persist else new_cache()
        return cls(path, payload, persist=persist)

    def get(self, identity: str) -> str | None:
        return self._payload["fingerprints"].get(identity)

    def put(self, identity: str, fingerprint: str) -> None:
        """Record *fingerprint* for *identity* and persist immediately."""
        self._payload["fingerprints"][identity] = fingerprint
        self._save()

    def discard(self, identity: str) -> None:
        """Drop the entry for *identity*, if any, and persist immediately."""
        if self._payload["fingerprints"].pop(identity, None) is not None:
            self._save()

    def __contains__(self, identity: object) -> bool:
        return identity in self._payload["fingerprints"]

    def __len__(self) -> int:
        return len(self._payload["fingerprints"])

    def _save(self) -> None:
        if self.persist:
            save_cache(self.path, self._payload)
