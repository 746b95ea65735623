"""Per-chunk hashing progress indicator."""

from __future__ import annotations

from typing import TextIO

from mirrorcheck.constants.reporting import PROGRESS_STEP, PROGRESS_TICK, cursor_back


class ProgressTicker:
    """Writes one tick per hashed chunk, wiping the line every ``step`` ticks.

    The wipe moves the cursor back over the ticks, blanks them and moves back
    again so long files do not scroll the terminal.
    """

    def __init__(self, stream: TextIO, *, enabled: bool = True, step: int = PROGRESS_STEP) -> None:
        self._stream = stream
        self._enabled = enabled
        self._step = step
        self._count = 0

    def reset(self) -> None:
        self._count = 0

    def tick(self) -> None:
        if not self._enabled:
            return
        self._count += 1
        self._stream.write(PROGRESS_TICK)
        if self._count % self._step == 0:
            back = cursor_back(self._step)
            self._stream.write(f"{back}{' ' * self._step}{back}")
        self._stream.flush()
