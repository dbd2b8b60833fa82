"""Tests for the per-line predicates and the end-of-signature check."""

from __future__ import annotations

import pytest

from mvn2llm.extract import classifier


@pytest.mark.parametrize(
    "line, expected",
    [
        ("/**", True),
        ("   /** Summary.", True),
        ("/** d */", True),
        ("/* plain */", False),
        ("/*", False),
        ("/**/", False),
        ("// comment", False),
        ("/// line doc", False),
    ],
)
def test_opens_block_doc(line: str, expected: bool) -> None:
    assert classifier.opens_block_doc(line) is expected


def test_closes_on_same_line() -> None:
    assert classifier.closes_on_same_line("/** d */")
    assert classifier.closes_on_same_line("  /** Returns x. */  ")
    assert not classifier.closes_on_same_line("/**")
    assert not classifier.closes_on_same_line("/* plain */")


def test_closes_block_doc() -> None:
    assert classifier.closes_block_doc(" */")
    assert classifier.closes_block_doc("*/ trailing")
    assert classifier.closes_block_doc(" * last words */")
    assert not classifier.closes_block_doc(" * middle line")


def test_opens_line_doc() -> None:
    assert classifier.opens_line_doc("/// doc")
    assert classifier.opens_line_doc("    ///")
    assert not classifier.opens_line_doc("// comment")


def test_semicolon_path_for_annotated_field() -> None:
    text = "@Deprecated String field;"

    assert classifier.contains_statement_terminator(text)
    assert not classifier.scan_brace_depth(text)
    assert classifier.end_of_signature(text)


def test_brace_inside_annotation_arguments_is_ignored() -> None:
    assert not classifier.scan_brace_depth('@SuppressWarnings({"unused",')
    assert not classifier.scan_brace_depth('@SuppressWarnings({"unused", "unchecked"})')
    assert not classifier.scan_brace_depth('@Matrix(value = {{1, 2}, {3, 4}}) public void m(')


def test_body_brace_after_balanced_parens_terminates() -> None:
    text = '@SuppressWarnings({"a","b"}) public void m(@Value("x") String s){'

    assert classifier.scan_brace_depth(text)
    assert classifier.end_of_signature(text)


def test_unbalanced_close_paren_does_not_go_negative() -> None:
    assert classifier.scan_brace_depth(") class X {")


def test_incomplete_signature_is_not_terminated() -> None:
    assert not classifier.end_of_signature("public static <T, R> List<R> doIt")
    assert not classifier.end_of_signature("@Deprecated(since")


def test_semicolon_inside_literal_terminates_early() -> None:
    # Known limitation: string contents are not inspected.
    assert classifier.end_of_signature('@Pattern(regexp = "a;b")')
