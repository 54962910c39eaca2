from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from jccs.engine.types import Diagnostic, FileResult, ScanState

# Removal order is fixed; none of these is a substring of another.
_STRIPPED_KEYWORDS: tuple[str, ...] = ("static", "abstract", "final", "public", "private", "protected")
_DECLARATION_PREFIXES: tuple[str, ...] = ("class", "interface")
# Java `String.trim()` drops U+0000..U+0020 and nothing else.
_TRIM_CHARS = "".join(chr(code) for code in range(0x21))


def normalize_line(raw: str) -> str:
    return raw.strip(_TRIM_CHARS).lower()


def strip_keywords(normalized: str) -> str:
    """
    Drop spaces and modifier keywords so `public static final class X` and
    `class X` share the same prefix.
    """

    stripped = normalized.replace(" ", "")
    for keyword in _STRIPPED_KEYWORDS:
        stripped = stripped.replace(keyword, "")
    return stripped


def is_declaration(normalized: str) -> bool:
    stripped = strip_keywords(normalized)
    if not stripped.startswith(_DECLARATION_PREFIXES):
        return False
    # Methods returning a class type: `public Class<?> getSource() {`
    return "()" not in stripped


class LineClassifier:
    """
    Single-pass classifier for the lines of one Java source file.

    Each call to `feed()` consumes the next line and returns a `Diagnostic`
    when that line declares a class or interface without a comment (or an
    `@Deprecated` annotation) right above it. Blank lines and annotations
    between the comment and the declaration are allowed.

    The declaration and comment-exit checks see the state as it was when the
    line started; the comment-entry and block-exit checks see the state after
    those updates. A one-line `/* ... */` therefore leaves the classifier in
    `COMMENT_LAST`.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self.reset()

    def reset(self) -> None:
        self.state = ScanState.OUTSIDE
        self.line_number = 0
        self.had_error = False

    def feed(self, raw: str) -> Diagnostic | None:
        self.line_number += 1
        line = normalize_line(raw)
        start_state = self.state

        diagnostic: Diagnostic | None = None
        if start_state is ScanState.OUTSIDE and is_declaration(line):
            diagnostic = Diagnostic(path=self.path, line=self.line_number)
            self.had_error = True

        if start_state is ScanState.COMMENT_LAST:
            if line and not line.startswith(("//", "/*", "@")):
                self.state = ScanState.OUTSIDE

        if self.state in (ScanState.OUTSIDE, ScanState.COMMENT_LAST):
            if line.startswith("/*"):
                self.state = ScanState.MULTI_LINE_COMMENT
            elif line.startswith("//"):
                self.state = ScanState.COMMENT_LAST
            elif line.startswith("@deprecated"):
                # Deprecated types are treated as documented.
                self.state = ScanState.COMMENT_LAST

        if self.state is ScanState.MULTI_LINE_COMMENT and line.endswith("*/"):
            self.state = ScanState.COMMENT_LAST

        return diagnostic


def classify_lines(lines: Iterable[str], *, path: Path) -> FileResult:
    classifier = LineClassifier(path)
    diagnostics: list[Diagnostic] = []
    for raw in lines:
        diagnostic = classifier.feed(raw)
        if diagnostic is not None:
            diagnostics.append(diagnostic)
    return FileResult(path=path, diagnostics=tuple(diagnostics), final_state=classifier.state)
