"""End-to-end manifest reconciliation for Mirrorcheck.

Candidates are processed in sorted order. A cached fingerprint is trusted
until a mismatch is recorded for that file; a mismatch removes the entry and
persists the removal before the next file, so the following run re-hashes it.
Any ``OSError`` while hashing or persisting aborts the whole run.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping, Sequence
from dataclasses import replace
from pathlib import Path

from mirrorcheck.config import MirrorCheckConfig
from mirrorcheck.exceptions import ConfigError
from mirrorcheck.io import file_digest
from mirrorcheck.manifest import load_manifest
from mirrorcheck.model import FileOutcome, VerifyResult
from mirrorcheck.reporting import StdoutReporter
from mirrorcheck.scanner.cache import FingerprintCache
from mirrorcheck.scanner.discovery import discover_candidates

logger = logging.getLogger(__name__)


def verify_mirror(
    config: MirrorCheckConfig,
    *,
    root: Path,
    reporter: StdoutReporter,
    use_cache: bool = True,
) -> VerifyResult:
    """Verify every candidate file under *root* against the configured manifest."""
    started_at = time.perf_counter()
    root = root.absolute()
    if not root.is_dir():
        raise ConfigError(f"Verification root does not exist or is not a directory: {root}")

    include = config.include
    manifest_path = config.manifest_path(root)

    cache = FingerprintCache.open(
        config.cache_path(root),
        persist=use_cache,
        root=root,
        index_suffix=config.index_suffix,
    )
    manifest = load_manifest(
        root,
        manifest_path,
        include,
        index_suffix=config.index_suffix,
        encoding=config.manifest_encoding,
    )
    candidates = discover_candidates(root, include, index_suffix=config.index_suffix)
    logger.debug(
        "Reconciling %d candidate(s) against %d manifest entries (%d cached)",
        len(candidates),
        len(manifest),
        len(cache),
    )

    def hasher(identity: str) -> str:
        return file_digest(candidates[identity], config.algorithm, on_chunk=reporter.progress.tick)

    result = reconcile(
        root=root,
        manifest_path=manifest_path,
        manifest=manifest,
        candidates=list(candidates),
        cache=cache,
        hasher=hasher,
        reporter=reporter,
    )
    return replace(result, duration_seconds=round(time.perf_counter() - started_at, 3))


def reconcile(
    *,
    root: Path,
    manifest_path: Path,
    manifest: Mapping[str, str],
    candidates: Sequence[str],
    cache: FingerprintCache,
    hasher: Callable[[str], str],
    reporter: StdoutReporter,
) -> VerifyResult:
    """Classify each candidate, update *cache*, and report manifest entries left unconfirmed."""
    outcomes: list[FileOutcome] = []
    hashed_files = 0
    cache_hits = 0

    for identity in candidates:
        expected = manifest.get(identity)
        if expected is None:
            reporter.absent(identity)
            outcomes.append(FileOutcome(identity=identity, status="absent"))
            continue

        reporter.begin(identity)
        actual = cache.get(identity)
        from_cache = actual is not None
        if actual is None:
            actual = hasher(identity)
            hashed_files += 1
            cache.put(identity, actual)
        else:
            cache_hits += 1

        if actual == expected:
            reporter.ok()
            outcomes.append(FileOutcome(identity, "ok", expected, actual, from_cache))
            continue

        reporter.fail(expected, actual)
        cache.discard(identity)
        outcomes.append(FileOutcome(identity, "fail", expected, actual, from_cache))
        logger.debug("Fingerprint mismatch for %s; cache entry dropped", identity)

    confirmed = {identity for identity in candidates if identity in cache}
    missing = tuple(sorted(identity for identity in manifest if identity not in confirmed))
    for identity in missing:
        reporter.missing(identity)

    return VerifyResult(
        root=str(root),
        manifest=str(manifest_path),
        outcomes=tuple(outcomes),
        missing=missing,
        hashed_files=hashed_files,
        cache_hits=cache_hits,
    )
