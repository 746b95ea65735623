"""Shared pytest fixtures for mirror verification tests."""

from __future__ import annotations

import io
import re
from pathlib import Path

import pytest

from mirrorcheck.config import MirrorCheckConfig
from mirrorcheck.reporting import StdoutReporter

ARCHIVE_PATTERN = r"^archive-\d+-\d+(_lost)?\.zip$|^archive_index\.inpx$"


@pytest.fixture
def mirror_root(tmp_path: Path) -> Path:
    """Return an empty directory used as the verification root."""
    root = tmp_path / "mirror"
    root.mkdir()
    return root


@pytest.fixture
def include() -> re.Pattern[str]:
    """Inclusion filter for ``archive-NNN-NN.zip`` files and ``archive_index.inpx``."""
    return re.compile(ARCHIVE_PATTERN)


@pytest.fixture
def config() -> MirrorCheckConfig:
    return MirrorCheckConfig(
        manifest="archives.md5",
        cache=".mirrorcheck-cache.json",
        include_pattern=ARCHIVE_PATTERN,
        index_suffix="inpx",
    )


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def reporter(output: io.StringIO) -> StdoutReporter:
    return StdoutReporter(output, manifest_label="archives.md5")
