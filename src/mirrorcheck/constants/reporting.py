"""Constants for stdout status lines and the progress indicator."""

from __future__ import annotations

PROGRESS_TICK: str = "."
PROGRESS_STEP: int = 30

STATUS_OK: str = "OK"
STATUS_FAIL: str = "FAIL"

ANSI_RED: str = "\033[31m"
ANSI_GREEN: str = "\033[32m"
ANSI_YELLOW: str = "\033[33m"
ANSI_RESET: str = "\033[0m"


def cursor_back(columns: int) -> str:
    """Return the ANSI sequence moving the cursor *columns* to the left."""
    return f"\033[{columns}D"
