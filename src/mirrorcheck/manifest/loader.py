"""Manifest loading for md5sum-style ``<fingerprint> <path>`` files."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from mirrorcheck.constants.config import DEFAULT_INDEX_SUFFIX, DEFAULT_MANIFEST_ENCODING
from mirrorcheck.exceptions import ManifestError
from mirrorcheck.scanner.identity import (
    file_identity,
    is_index_file,
    matches_filter,
    normalize_separators,
    relative_to_root,
    root_key,
)

logger = logging.getLogger(__name__)


def load_manifest(
    root: Path,
    manifest_path: Path,
    include: re.Pattern[str],
    *,
    index_suffix: str = DEFAULT_INDEX_SUFFIX,
    encoding: str = DEFAULT_MANIFEST_ENCODING,
) -> dict[str, str]:
    """Parse *manifest_path* into a mapping of file identity to expected fingerprint.

    Lines that are not exactly two whitespace-separated tokens, or whose path
    falls outside the verification universe, are dropped. Duplicate identities
    keep the last line's fingerprint.
    """
    try:
        text = manifest_path.read_text(encoding=encoding)
    except OSError as exc:
        raise ManifestError(f"Cannot read manifest {manifest_path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ManifestError(f"Manifest {manifest_path} is not valid {encoding}: {exc}") from exc

    expected: dict[str, str] = {}
    dropped = 0
    for line in text.splitlines():
        entry = parse_manifest_line(line, root, include, index_suffix=index_suffix)
        if entry is None:
            dropped += 1
            continue
        identity, fingerprint = entry
        expected[identity] = fingerprint

    logger.debug("Loaded %d manifest entries from %s (%d line(s) ignored)", len(expected), manifest_path, dropped)
    return expected


def parse_manifest_line(
    line: str,
    root: Path,
    include: re.Pattern[str],
    *,
    index_suffix: str = DEFAULT_INDEX_SUFFIX,
) -> tuple[str, str] | None:
    """Return ``(identity, fingerprint)`` for one manifest line, or ``None`` to skip it."""
    parts = line.split()
    if len(parts) != 2:
        return None

    fingerprint = parts[0].lower()
    path = normalize_separators(parts[1])

    relative = relative_to_root(root, path)
    if relative is not None:
        if matches_filter(include, relative):
            return file_identity(root, relative, index_suffix), fingerprint
        return None

    if is_index_file(path, index_suffix):
        return f"{root_key(root)}/{path.lstrip('/')}", fingerprint

    return None
