"""Shared file I/O helpers."""

from .files import file_digest
from .json_io import load_json_file, write_json_atomic

__all__ = ["file_digest", "load_json_file", "write_json_atomic"]
