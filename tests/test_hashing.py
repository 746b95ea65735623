"""Tests for streaming file hashing."""

from __future__ import annotations

import hashlib
from pathlib import Path

import pytest

from mirrorcheck.io import file_digest

EMPTY_MD5 = "d41d8cd98f00b204e9800998ecf8427e"


def test_empty_file_has_known_md5(tmp_path: Path) -> None:
    path = tmp_path / "empty.zip"
    path.write_bytes(b"")

    assert file_digest(path) == EMPTY_MD5


def test_digest_matches_whole_file_hash_across_chunks(tmp_path: Path) -> None:
    data = bytes(range(256)) * 41
    path = tmp_path / "data.zip"
    path.write_bytes(data)

    assert file_digest(path, chunk_size=100) == hashlib.md5(data).hexdigest()


def test_one_tick_per_chunk(tmp_path: Path) -> None:
    path = tmp_path / "data.zip"
    path.write_bytes(b"x" * 250)
    ticks: list[int] = []

    digest = file_digest(path, chunk_size=100, on_chunk=lambda: ticks.append(1))

    assert len(ticks) == 3
    assert digest == hashlib.md5(b"x" * 250).hexdigest()


def test_other_algorithm(tmp_path: Path) -> None:
    path = tmp_path / "data.zip"
    path.write_bytes(b"abc")

    assert file_digest(path, "sha256") == hashlib.sha256(b"abc").hexdigest()


def test_missing_file_raises_oserror(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        file_digest(tmp_path / "nope.zip")
