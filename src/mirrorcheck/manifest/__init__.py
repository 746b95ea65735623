"""Expected-fingerprint manifest parsing."""

from .loader import load_manifest, parse_manifest_line

__all__ = ["load_manifest", "parse_manifest_line"]
