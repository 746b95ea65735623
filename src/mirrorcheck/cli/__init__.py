"""Command-line interface for Mirrorcheck."""
