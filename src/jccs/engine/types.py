from __future__ import annotations

import threading
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

MISSING_COMMENT_MESSAGE = "No comment found"


class ScanState(Enum):
    OUTSIDE = "outside"
    COMMENT_LAST = "comment_last"
    MULTI_LINE_COMMENT = "multi_line_comment"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    path: Path
    line: int  # 1-based
    message: str = MISSING_COMMENT_MESSAGE


@dataclass(frozen=True, slots=True)
class FileResult:
    path: Path
    diagnostics: tuple[Diagnostic, ...] = ()
    final_state: ScanState = ScanState.OUTSIDE

    @property
    def had_error(self) -> bool:
        return bool(self.diagnostics)


@dataclass(slots=True)
class RunTotals:
    """Counters accumulated across one run; only the aggregator mutates them."""

    files_processed: int = 0
    files_with_error: int = 0
    total_diagnostics: int = 0
    files_unreadable: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def record(self, result: FileResult) -> None:
        with self._lock:
            self.files_processed += 1
            if result.had_error:
                self.files_with_error += 1
            self.total_diagnostics += len(result.diagnostics)

    def record_unreadable(self) -> None:
        with self._lock:
            self.files_unreadable += 1

    @property
    def percent(self) -> int:
        """Truncated percentage of processed files with at least one violation."""

        if self.files_processed == 0:
            return 0
        return (100 * self.files_with_error) // self.files_processed
