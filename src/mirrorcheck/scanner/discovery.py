"""Candidate file discovery under the verification root."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from mirrorcheck.scanner.identity import file_identity, matches_filter, normalize_entry_name

logger = logging.getLogger(__name__)


def discover_candidates(root: Path, include: re.Pattern[str], *, index_suffix: str) -> dict[str, Path]:
    """Map each file directly under *root* accepted by *include* to its path on disk.

    Keys are file identities in ascending order; values are the real entries to
    hash, since an identity need not spell the on-disk name. Only immediate
    entries are considered. Directories and symlinks to directories are
    skipped; a failure to list *root* propagates as ``OSError``.
    """
    found: dict[str, Path] = {}
    skipped = 0

    for entry in root.iterdir():
        if not entry.is_file():
            continue
        relative = normalize_entry_name(entry.name)
        if not matches_filter(include, relative):
            skipped += 1
            continue
        found[file_identity(root, relative, index_suffix)] = entry

    logger.debug("Discovered %d candidate file(s) under %s (%d filtered out)", len(found), root, skipped)
    return {identity: found[identity] for identity in sorted(found)}
