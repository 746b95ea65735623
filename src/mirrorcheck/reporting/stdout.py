"""Streaming stdout reporter for verification runs."""

from __future__ import annotations

from typing import TextIO

from mirrorcheck.constants.branding import SUMMARY_TITLE
from mirrorcheck.constants.reporting import (
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    ANSI_YELLOW,
    STATUS_FAIL,
    STATUS_OK,
)
from mirrorcheck.model import VerifyResult
from mirrorcheck.reporting.progress import ProgressTicker


class StdoutReporter:
    """Writes one status line per verified file as the run progresses.

    A verified file is announced with ``begin`` before hashing so the progress
    ticks land on the same line, then closed with ``ok`` or ``fail``.
    """

    def __init__(
        self,
        stream: TextIO,
        *,
        color: bool = False,
        progress: bool = False,
        manifest_label: str = "manifest",
    ) -> None:
        """Initialise the reporter."""
        self._stream = stream
        self._color = color
        self._manifest_label = manifest_label
        self.progress = ProgressTicker(stream, enabled=progress)

    def begin(self, identity: str) -> None:
        self.progress.reset()
        self._write(f"{identity}.")

    def ok(self) -> None:
        self._write(f".{self._colorize(STATUS_OK, ANSI_GREEN)}.\n")

    def fail(self, expected: str, actual: str) -> None:
        self._write(f".{self._colorize(STATUS_FAIL, ANSI_RED)}.\n")
        self._write(f"Expected: {expected}, Actual: {actual}\n")

    def absent(self, identity: str) -> None:
        self._write(f"{identity} {self._colorize('absent', ANSI_YELLOW)} in {self._manifest_label}.\n")

    def missing(self, identity: str) -> None:
        self._write(f"{identity} is missing or was not handled\n")

    def summary(self, result: VerifyResult) -> None:
        """Write the verbose end-of-run summary block."""
        counts = result.status_counts()
        lines = [
            "",
            SUMMARY_TITLE,
            f"  root: {result.root}",
            f"  manifest: {result.manifest}",
            f"  ok: {counts['ok']}  fail: {counts['fail']}  absent: {counts['absent']}  missing: {counts['missing']}",
            f"  hashed files: {result.hashed_files}  cache hits: {result.cache_hits}",
            f"  duration: {result.duration_seconds:.2f}s",
        ]
        self._write("\n".join(lines) + "\n")

    def _colorize(self, text: str, color: str) -> str:
        if not self._color:
            return text
        return f"{color}{text}{ANSI_RESET}"

    def _write(self, text: str) -> None:
        self._stream.write(text)
        self._stream.flush()
