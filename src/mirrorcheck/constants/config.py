"""Configuration defaults and filenames."""

from __future__ import annotations

from mirrorcheck.constants.cache import CACHE_FILENAME

CONFIG_FILENAME: str = "mirrorcheck.yaml"

DEFAULT_MANIFEST_FILENAME: str = "librusec_local.md5"
DEFAULT_CACHE_FILENAME: str = CACHE_FILENAME
DEFAULT_INCLUDE_PATTERN: str = r"^fb2-\d+-\d+(_lost)?\.zip$|^librusec_local_fb2\.inpx$"
DEFAULT_INDEX_SUFFIX: str = "inpx"
DEFAULT_ALGORITHM: str = "md5"
DEFAULT_MANIFEST_ENCODING: str = "utf-8-sig"

# Extendable-output digests need an explicit length and cannot fingerprint files.
UNSUPPORTED_ALGORITHMS: frozenset[str] = frozenset({"shake_128", "shake_256"})
