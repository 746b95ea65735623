"""Config data model for Mirrorcheck runs."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from mirrorcheck.constants.config import (
    DEFAULT_ALGORITHM,
    DEFAULT_CACHE_FILENAME,
    DEFAULT_INCLUDE_PATTERN,
    DEFAULT_INDEX_SUFFIX,
    DEFAULT_MANIFEST_ENCODING,
    DEFAULT_MANIFEST_FILENAME,
)


@dataclass(frozen=True)
class MirrorCheckConfig:
    """Resolved verifier config.

    ``manifest`` and ``cache`` may be relative; they are resolved against the
    verification root when used.
    """

    manifest: str = DEFAULT_MANIFEST_FILENAME
    cache: str = DEFAULT_CACHE_FILENAME
    include_pattern: str = DEFAULT_INCLUDE_PATTERN
    index_suffix: str = DEFAULT_INDEX_SUFFIX
    algorithm: str = DEFAULT_ALGORITHM
    manifest_encoding: str = DEFAULT_MANIFEST_ENCODING

    @property
    def include(self) -> re.Pattern[str]:
        """Compiled inclusion filter."""
        return re.compile(self.include_pattern)

    def manifest_path(self, root: Path) -> Path:
        """Absolute manifest location for *root*."""
        return _resolve_against(root, self.manifest)

    def cache_path(self, root: Path) -> Path:
        """Absolute cache file location for *root*."""
        return _resolve_against(root, self.cache)


def _resolve_against(root: Path, value: str) -> Path:
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = root / path
    return path.resolve()
