"""Result entities produced by a verification run."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from mirrorcheck.types import FileStatus


@dataclass(frozen=True)
class FileOutcome:
    """Classification of one candidate file."""

    identity: str
    status: FileStatus
    expected: str | None = None
    actual: str | None = None
    from_cache: bool = False


@dataclass(frozen=True)
class VerifyResult:
    """Outcome of a full reconciliation pass."""

    root: str
    manifest: str
    outcomes: tuple[FileOutcome, ...]
    missing: tuple[str, ...]
    hashed_files: int
    cache_hits: int
    duration_seconds: float = 0.0

    def status_counts(self) -> dict[str, int]:
        """Return per-status counts including ``missing``, with zero entries present."""
        counts = Counter(outcome.status for outcome in self.outcomes)
        return {
            "ok": counts.get("ok", 0),
            "fail": counts.get("fail", 0),
            "absent": counts.get("absent", 0),
            "missing": len(self.missing),
        }

    def identities_with(self, status: FileStatus) -> tuple[str, ...]:
        return tuple(outcome.identity for outcome in self.outcomes if outcome.status == status)

    @property
    def has_problems(self) -> bool:
        """True when anything other than OK was reported."""
        return bool(self.missing) or any(outcome.status != "ok" for outcome in self.outcomes)
