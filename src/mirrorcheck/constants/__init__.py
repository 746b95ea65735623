"""Module-level constants shared across Mirrorcheck."""
