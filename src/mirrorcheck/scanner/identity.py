"""File identity rules shared by the manifest loader and the directory scanner.

Both sides must derive the same key for the same file, otherwise reconciliation
silently fails to match, so every identity is built through ``file_identity``.
"""

from __future__ import annotations

import re
from pathlib import Path, PurePosixPath

_REPEATED_SLASHES = re.compile(r"/{2,}")


def normalize_separators(raw_path: str) -> str:
    """Translate ``*`` and ``\\`` separators in a manifest path to ``/``."""
    return raw_path.replace("*", "/").replace("\\", "/")


def normalize_entry_name(name: str) -> str:
    """Translate ``\\`` in a directory entry name to ``/``.

    ``*`` is a manifest-only quirk and stays literal in names read from disk.
    """
    return name.replace("\\", "/")


def root_key(root: Path) -> str:
    """Render *root* as a POSIX string without a trailing slash."""
    return root.as_posix().rstrip("/")


def relative_to_root(root: Path, normalized_path: str) -> str | None:
    """Strip the *root* prefix from a ``/``-separated path.

    Paths without a leading slash are already root-relative. Returns ``None``
    when an absolute path does not live under root (or names root itself).
    Repeated slashes are collapsed before comparing components.
    """
    collapsed = PurePosixPath(_REPEATED_SLASHES.sub("/", normalized_path))
    if collapsed.is_absolute():
        try:
            collapsed = collapsed.relative_to(PurePosixPath(root.as_posix()))
        except ValueError:
            return None
    if collapsed == PurePosixPath("."):
        return None
    return collapsed.as_posix()


def is_index_file(path: str, index_suffix: str) -> bool:
    """Return True for the manifest-adjacent index file."""
    return bool(index_suffix) and path.endswith(index_suffix)


def file_identity(root: Path, relative: str, index_suffix: str) -> str:
    """Return the cache/manifest key for a root-relative path.

    The index file is keyed by its absolute path; everything else by the
    relative path.
    """
    if is_index_file(relative, index_suffix):
        return f"{root_key(root)}/{relative}"
    return relative


def matches_filter(include: re.Pattern[str], relative: str) -> bool:
    """Return True when the inclusion filter accepts *relative*."""
    return include.search(relative) is not None
