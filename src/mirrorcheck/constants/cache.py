"""Constants for the fingerprint cache and file hashing."""

from __future__ import annotations

CACHE_FILENAME: str = ".mirrorcheck-cache.json"
CACHE_VERSION: int = 1
CACHE_TEMP_PREFIX: str = ".mirrorcheck-cache-"
CACHE_TEMP_SUFFIX: str = ".tmp"

# Key used by md5map-style caches written before the versioned format.
LEGACY_CACHE_KEY: str = "md5map"

FILE_HASH_CHUNK_SIZE: int = 10 * 1024 * 1024

CACHE_SCHEMA: dict[str, object] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["version", "fingerprints"],
    "properties": {
        "version": {"const": CACHE_VERSION},
        "fingerprints": {
            "type": "object",
            "additionalProperties": {"type": "string", "pattern": "^[0-9a-f]+$"},
        },
    },
}

LEGACY_CACHE_SCHEMA: dict[str, object] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": [LEGACY_CACHE_KEY],
    "properties": {
        LEGACY_CACHE_KEY: {
            "type": "object",
            "additionalProperties": {"type": "string"},
        },
    },
}
