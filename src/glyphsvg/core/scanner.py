"""Bounded, fail-soft directory scanning.

This module walks a directory tree and hands every accepted file to a
processor on a thread pool, never running more than ``workers`` at once.
A failure while processing one file is logged and counted; it never stops
the scan of the remaining files.

Key components:
- Scanner: Protocol with filter() and process()
- discover: Generator of accepted, non-ignored files
- scan_summarize: Run a scan and aggregate outcomes into ScanStats
"""

import fnmatch
import os
import time
import traceback
from collections.abc import Iterator, Sequence
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, as_completed, wait
from pathlib import Path
from typing import Any, Protocol, TypeVar

import structlog

from glyphsvg.exceptions import ScanError
from glyphsvg.utils import ScanLogger, ScanStats

ContextT_contra = TypeVar("ContextT_contra", contravariant=True)
OutcomeT_co = TypeVar("OutcomeT_co", covariant=True)


class Scanner(Protocol[ContextT_contra, OutcomeT_co]):
    """Per-file behavior plugged into scan_summarize."""

    def filter(self, path: Path) -> bool:
        """Return True if the file should be processed."""
        ...

    def process(self, path: Path, context: ContextT_contra) -> OutcomeT_co | None:
        """Process one file; None means it produced nothing."""
        ...


def match_ignore(path: Path, root: Path, patterns: Sequence[str]) -> str | None:
    """Find the ignore pattern matching a path, if any.

    A pattern matches when it matches the root-relative POSIX path or any
    single component of it. The location of the root itself never matters.

    Args:
        path: Path under root
        root: Scan root
        patterns: fnmatch-style patterns (case-sensitive)

    Returns:
        The first matching pattern, or None
    """
    relative = path.relative_to(root)
    candidates = [relative.as_posix(), *relative.parts]
    for pattern in patterns:
        if any(fnmatch.fnmatchcase(candidate, pattern) for candidate in candidates):
            return pattern
    return None


def discover(
    root: Path,
    scanner: Scanner[Any, Any],
    ignore: Sequence[str] = (),
    scan_logger: ScanLogger | None = None,
) -> Iterator[Path]:
    """Yield files under root accepted by the scanner, in sorted order.

    Ignored directories are pruned without being walked. Symlinked
    directories are not followed.
    """
    log = structlog.get_logger("glyphsvg.scanner")

    def on_error(error: OSError) -> None:
        log.warning("Cannot read directory", path=error.filename, error=error.strerror)

    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        current = Path(dirpath)

        kept = []
        for name in sorted(dirnames):
            if match_ignore(current / name, root, ignore) is None:
                kept.append(name)
            elif scan_logger is not None:
                scan_logger.count_ignored()
        dirnames[:] = kept

        for name in sorted(filenames):
            path = current / name
            if match_ignore(path, root, ignore) is not None:
                if scan_logger is not None:
                    scan_logger.count_ignored()
                continue
            if scanner.filter(path):
                yield path


def _collect(future: Future, path: Path, scan_logger: ScanLogger) -> None:
    try:
        outcome = future.result()
    except Exception as e:
        scan_logger.log_file_error(path, e, traceback.format_exc())
        return

    if outcome is None:
        scan_logger.log_file_empty(path)
    else:
        scan_logger.log_file_complete(path, outcome)


def scan_summarize(
    root: Path,
    scanner: Scanner[ContextT_contra, Any],
    context: ContextT_contra,
    workers: int = 1,
    ignore: Sequence[str] = (),
) -> ScanStats:
    """Process every accepted file under root and aggregate the outcomes.

    Submission is bounded: a new file is only handed to the pool once
    fewer than ``workers`` tasks are in flight, so ``workers=1`` is strictly
    sequential.

    Args:
        root: Directory to walk
        scanner: Filter and per-file processor
        context: Read-only value passed to every process() call
        workers: Maximum concurrent process() calls
        ignore: fnmatch-style patterns excluded from the walk

    Returns:
        ScanStats with succeeded, empty, failed and ignored counts

    Raises:
        ScanError: If root is not a directory or workers is below 1
        KeyboardInterrupt: If the scan is cancelled by the user
    """
    if not root.is_dir():
        raise ScanError(str(root), "not a directory")
    if workers < 1:
        raise ScanError(str(root), f"invalid worker count {workers}")

    logger = structlog.get_logger("glyphsvg.scanner")
    scan_logger = ScanLogger(logger)
    stats = scan_logger.stats
    stats.start_time = time.time()

    logger.info("Starting scan", root=str(root), workers=workers, ignore=list(ignore))

    pending: dict[Future, Path] = {}
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="glyphsvg") as executor:
        try:
            for path in discover(root, scanner, ignore, scan_logger):
                if len(pending) >= workers:
                    done, _ = wait(pending, return_when=FIRST_COMPLETED)
                    for future in done:
                        _collect(future, pending.pop(future), scan_logger)

                scan_logger.log_file_start(path)
                pending[executor.submit(scanner.process, path, context)] = path

            for future in as_completed(list(pending)):
                _collect(future, pending.pop(future), scan_logger)

        except KeyboardInterrupt:
            logger.info("Cancellation requested by user", pending=len(pending))
            for future in pending:
                future.cancel()
            executor.shutdown(wait=True, cancel_futures=True)
            raise

    stats.end_time = time.time()

    logger.info(
        "Scan complete",
        succeeded=stats.succeeded,
        empty=stats.empty,
        failed=stats.failed,
        ignored=stats.ignored,
        duration_seconds=round(stats.duration_seconds, 2),
    )

    return stats
