from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from jccs.config import ScanConfig
from jccs.engine.types import Diagnostic, FileResult, RunTotals
from jccs.scanner import ScanFailure, ScanTarget, discover_files, prepare_target, scan_files

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AuditResult:
    target: ScanTarget
    totals: RunTotals
    results: tuple[FileResult, ...]
    unreadable: tuple[ScanFailure, ...] = ()

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return tuple(d for result in self.results for d in result.diagnostics)


@dataclass(frozen=True, slots=True)
class AuditCallbacks:
    on_diagnostic: Callable[[Diagnostic], None] | None = None
    on_file_scanned: Callable[[FileResult], None] | None = None
    on_unreadable: Callable[[ScanFailure], None] | None = None


def audit_path(
    scan_path: Path,
    *,
    config: ScanConfig | None = None,
    callbacks: AuditCallbacks | None = None,
) -> AuditResult:
    target = prepare_target(scan_path, config)
    logger.info("beginning scan of %s", scan_path)
    files = discover_files(target)
    logger.debug("discovered %d candidate file(s)", len(files))
    return audit_files(target, files=files, callbacks=callbacks)


def audit_files(
    target: ScanTarget,
    *,
    files: list[Path],
    callbacks: AuditCallbacks | None = None,
) -> AuditResult:
    """
    Classify `files` and aggregate the per-file results.

    Unreadable files are skipped: they are logged, reported through
    `on_unreadable` and counted separately, never as processed.
    """

    totals = RunTotals()
    results: list[FileResult] = []
    failures: list[ScanFailure] = []

    for outcome in scan_files(files, workers=target.config.workers):
        if isinstance(outcome, ScanFailure):
            totals.record_unreadable()
            failures.append(outcome)
            logger.error("cannot read %s: %s", outcome.path, outcome.error.strerror or outcome.error)
            if callbacks is not None and callbacks.on_unreadable is not None:
                callbacks.on_unreadable(outcome)
            continue

        totals.record(outcome)
        results.append(outcome)
        if callbacks is not None:
            if callbacks.on_diagnostic is not None:
                for diagnostic in outcome.diagnostics:
                    callbacks.on_diagnostic(diagnostic)
            if callbacks.on_file_scanned is not None:
                callbacks.on_file_scanned(outcome)

    logger.debug(
        "processed %d file(s), %d with missing comments, %d unreadable",
        totals.files_processed,
        totals.files_with_error,
        totals.files_unreadable,
    )
    return AuditResult(target=target, totals=totals, results=tuple(results), unreadable=tuple(failures))
