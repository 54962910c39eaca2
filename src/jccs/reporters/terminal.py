from __future__ import annotations

from rich.console import Console
from rich.text import Text

from jccs.engine.types import Diagnostic, RunTotals


def format_diagnostic(index: int, diagnostic: Diagnostic) -> str:
    return f"{index}) {diagnostic.message}: {diagnostic.path}: {diagnostic.line}"


def format_summary(totals: RunTotals) -> str:
    return f"Complete. Fail: {totals.files_with_error}/{totals.files_processed} ({totals.percent}%)"


class TerminalReporter:
    """
    Streams one numbered line per diagnostic to the error console and prints
    the summary line to the output console.
    """

    def __init__(self, *, console: Console, err_console: Console) -> None:
        self.console = console
        self.err_console = err_console
        self.count = 0

    def diagnostic(self, diagnostic: Diagnostic) -> None:
        self.count += 1
        self.err_console.print(Text(format_diagnostic(self.count, diagnostic)), soft_wrap=True)

    def summary(self, totals: RunTotals) -> None:
        self.console.print()
        self.console.print(Text(format_summary(totals)), soft_wrap=True)
