from __future__ import annotations

from pathlib import Path

import pytest

from jccs.engine.classifier import LineClassifier, classify_lines, is_declaration, normalize_line, strip_keywords
from jccs.engine.types import ScanState

PATH = Path("Example.java")


def _lines(result) -> list[int]:
    return [d.line for d in result.diagnostics]


def test_empty_file_has_no_diagnostics() -> None:
    result = classify_lines([], path=PATH)
    assert result.diagnostics == ()
    assert result.had_error is False
    assert result.final_state is ScanState.OUTSIDE


def test_line_comment_directly_above_class_counts_as_documentation() -> None:
    result = classify_lines(["// Foo does things", "class Foo {", "}"], path=PATH)
    assert result.diagnostics == ()
    assert result.had_error is False


def test_undocumented_class_after_package_and_imports_is_flagged_once() -> None:
    source = [
        "package com.example;",
        "",
        "import java.util.List;",
        "",
        "public class Foo {",
        "}",
    ]
    result = classify_lines(source, path=PATH)
    assert _lines(result) == [5]
    assert result.had_error is True
    assert result.diagnostics[0].path == PATH
    assert result.diagnostics[0].message == "No comment found"


@pytest.mark.parametrize("annotation", ["@Deprecated", "@deprecated", "  @DEPRECATED  "])
def test_deprecated_annotation_suppresses_declaration(annotation: str) -> None:
    result = classify_lines(["package a;", annotation, "public class Old {", "}"], path=PATH)
    assert result.diagnostics == ()


def test_deprecated_only_covers_the_next_declaration() -> None:
    source = ["@Deprecated", "class Old {", "}", "class Fresh {", "}"]
    assert _lines(classify_lines(source, path=PATH)) == [4]


def test_method_returning_class_is_not_a_declaration() -> None:
    result = classify_lines(["    public Class<T> getSource() {}"], path=PATH)
    assert result.diagnostics == ()


def test_javadoc_with_annotations_and_blank_lines_before_class() -> None:
    source = [
        "/**",
        " * Doc.",
        " */",
        '@SuppressWarnings("unchecked")',
        "",
        "public final class Foo {",
        "}",
    ]
    assert classify_lines(source, path=PATH).diagnostics == ()


def test_single_line_block_comment_documents_interface() -> None:
    result = classify_lines(["/* Bar contract. */", "interface Bar {", "}"], path=PATH)
    assert result.diagnostics == ()
    assert result.final_state is ScanState.OUTSIDE


def test_code_between_comment_and_class_resets_documentation() -> None:
    source = ["// license header", "package a;", "class Foo {"]
    assert _lines(classify_lines(source, path=PATH)) == [3]


def test_every_undocumented_declaration_is_reported_in_order() -> None:
    source = ["class A {", "}", "", "protected static interface B {", "}"]
    result = classify_lines(source, path=PATH)
    assert _lines(result) == [1, 4]
    assert result.had_error is True


def test_line_numbers_count_blank_lines() -> None:
    assert _lines(classify_lines(["", "   ", "class Foo {"], path=PATH)) == [3]


def test_declarations_inside_block_comment_are_ignored() -> None:
    source = ["/*", "class Commented {", "*/", "class Foo {"]
    # `class Foo` directly follows the closing `*/`, so it is documented.
    assert classify_lines(source, path=PATH).diagnostics == ()


def test_unterminated_block_comment_ends_in_multi_line_state() -> None:
    result = classify_lines(["/**", " * never closed", "class Foo {"], path=PATH)
    assert result.diagnostics == ()
    assert result.final_state is ScanState.MULTI_LINE_COMMENT


def test_parentheses_on_declaration_line_suppress_the_check() -> None:
    result = classify_lines(["class Foo { // see bar()"], path=PATH)
    assert result.diagnostics == ()


def test_enum_is_not_checked() -> None:
    assert classify_lines(["public enum Color {", "}"], path=PATH).diagnostics == ()


def test_comment_then_annotation_keeps_comment_state() -> None:
    classifier = LineClassifier(PATH)
    classifier.feed("// doc")
    assert classifier.state is ScanState.COMMENT_LAST
    classifier.feed("@Entity")
    assert classifier.state is ScanState.COMMENT_LAST
    classifier.feed("")
    assert classifier.state is ScanState.COMMENT_LAST
    assert classifier.feed("class Foo {") is None
    assert classifier.state is ScanState.OUTSIDE


def test_reset_restarts_state_and_line_numbers() -> None:
    classifier = LineClassifier(PATH)
    classifier.feed("/*")
    classifier.feed("class Foo {")
    assert classifier.state is ScanState.MULTI_LINE_COMMENT

    classifier.reset()
    assert classifier.state is ScanState.OUTSIDE
    assert classifier.had_error is False
    diagnostic = classifier.feed("class Foo {")
    assert diagnostic is not None
    assert diagnostic.line == 1
    assert classifier.had_error is True


def test_strip_keywords_removes_spaces_and_modifiers() -> None:
    assert strip_keywords("public static final class foo {") == "classfoo{"
    assert strip_keywords("protected abstract interface bar") == "interfacebar"
    assert strip_keywords("private class x") == "classx"


def test_is_declaration_heuristics() -> None:
    assert is_declaration("public abstract class foo extends bar {")
    assert is_declaration("interface baz")
    assert not is_declaration("public class<?> getsource() {")
    assert not is_declaration("return classes;")
    assert not is_declaration("// class foo")


def test_normalize_line_trims_like_java() -> None:
    assert normalize_line("\t  Public Class Foo {\r\n") == "public class foo {"
    assert normalize_line("\x00\x1fclass A") == "class a"
    assert normalize_line("\u00a0class A\u2028") == "\u00a0class a\u2028"


def test_non_breaking_space_indent_is_not_trimmed() -> None:
    assert classify_lines(["\u00a0public class Foo {"], path=PATH).diagnostics == ()


def test_control_characters_are_trimmed_before_the_check() -> None:
    assert _lines(classify_lines(["\x00class Foo {"], path=PATH)) == [1]
