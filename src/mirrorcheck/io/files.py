"""Streaming file hashing."""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from pathlib import Path

from mirrorcheck.constants.cache import FILE_HASH_CHUNK_SIZE
from mirrorcheck.constants.config import DEFAULT_ALGORITHM


def file_digest(
    path: Path,
    algorithm: str = DEFAULT_ALGORITHM,
    *,
    chunk_size: int = FILE_HASH_CHUNK_SIZE,
    on_chunk: Callable[[], None] | None = None,
) -> str:
    """Return the lowercase hex digest of *path*, reading it in fixed-size chunks.

    ``on_chunk`` is invoked once per chunk consumed and has no influence on the
    result. ``OSError`` from opening or reading the file propagates unchanged.
    """
    digest = hashlib.new(algorithm)
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(chunk_size), b""):
            digest.update(chunk)
            if on_chunk is not None:
                on_chunk()
    return digest.hexdigest()
