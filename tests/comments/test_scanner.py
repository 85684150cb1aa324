"""Tests for CommentScanner and the module-level helpers."""

import logging
from pathlib import Path

import pytest

from slicewise import (
    CommentScanner,
    InlineCommentRule,
    LexicalUnit,
    LexicalUnitKind,
    PragmaRule,
    UnterminatedCommentError,
    scan_comments,
)
from slicewise.comments import apply_rules, default_rules

C_SOURCE = """\
#pragma once
#include <stdio.h>

/*
 * Entry point.
 */
int main(void) {
    int x = 5; // counter
    /* inline block */ x++;
    _Pragma("omp parallel")
    return x;
}
"""


def _kinds(units: list[LexicalUnit]) -> list[LexicalUnitKind]:
    return [u.kind for u in units]


class TestBasicScanning:
    def test_empty_text(self) -> None:
        assert scan_comments("") == []

    def test_no_comments(self) -> None:
        assert scan_comments('int x = 5;\nchar *name = "test";\nreturn x;') == []

    def test_inline_comments(self) -> None:
        text = "int x = 5; // First comment\nString y; // Second comment\n// Third comment\n"
        units = scan_comments(text)
        assert [u.text for u in units] == [" First comment", " Second comment", " Third comment"]
        assert set(_kinds(units)) == {LexicalUnitKind.INLINE_COMMENT}

    def test_empty_inline_comment(self) -> None:
        assert scan_comments("int x = 5; //")[0].text == ""

    def test_unicode_comment(self) -> None:
        assert scan_comments("// café, naïve")[0].text == " café, naïve"

    def test_c_source(self) -> None:
        units = scan_comments(C_SOURCE)
        assert [(u.kind, u.text) for u in units] == [
            (LexicalUnitKind.PRAGMA, "once"),
            (LexicalUnitKind.BLOCK_COMMENT, "\n* Entry point.\n"),
            (LexicalUnitKind.INLINE_COMMENT, " counter"),
            (LexicalUnitKind.BLOCK_COMMENT, "inline block"),
            (LexicalUnitKind.PRAGMA_MACRO, "omp parallel"),
        ]


class TestRulePriority:
    def test_first_matching_rule_wins(self) -> None:
        """An inline marker takes the line before a block marker on it."""
        units = scan_comments("// contains /* fake block */ markers")
        assert len(units) == 1
        assert units[0].kind is LexicalUnitKind.INLINE_COMMENT

    def test_one_unit_per_line(self) -> None:
        units = scan_comments("/* a */ // b")
        assert [(u.kind, u.text) for u in units] == [(LexicalUnitKind.INLINE_COMMENT, " b")]

    def test_continuation_lines_not_rescanned(self) -> None:
        """Lines consumed by a block comment are not offered to other rules."""
        units = scan_comments("/* start\n// not inline\n#pragma not_pragma */\n// after")
        assert _kinds(units) == [LexicalUnitKind.BLOCK_COMMENT, LexicalUnitKind.INLINE_COMMENT]
        assert units[0].text == "start\n// not inline\n#pragma not_pragma"
        assert units[1].text == " after"

    def test_pragma_continuation_then_comment(self) -> None:
        units = scan_comments("#pragma omp parallel \\\n    for\n// done")
        assert [(u.kind, u.text) for u in units] == [
            (LexicalUnitKind.PRAGMA, "omp parallel \nfor"),
            (LexicalUnitKind.INLINE_COMMENT, " done"),
        ]

    def test_pragma_keyword_in_string_does_not_stop_scan(self) -> None:
        units = scan_comments('puts("use _Pragma(");\n// after')
        assert [(u.kind, u.text) for u in units] == [(LexicalUnitKind.INLINE_COMMENT, " after")]

    def test_custom_rules(self) -> None:
        scanner = CommentScanner([PragmaRule()])
        assert _kinds(scanner.scan("// skipped\n#pragma kept")) == [LexicalUnitKind.PRAGMA]

    def test_default_rule_order(self) -> None:
        names = [type(rule).__name__ for rule in default_rules()]
        assert names == ["InlineCommentRule", "BlockCommentRule", "PragmaRule", "PragmaMacroRule"]


class TestApplyRules:
    def test_match(self) -> None:
        unit = apply_rules("int x = 5; // Test comment", iter(()), default_rules())
        assert unit == LexicalUnit(LexicalUnitKind.INLINE_COMMENT, " Test comment")

    def test_no_match(self) -> None:
        assert apply_rules("int x = 5;", iter(()), default_rules()) is None

    def test_no_rules(self) -> None:
        assert apply_rules("// x", iter(()), []) is None


class TestScanLines:
    def test_from_iterable(self) -> None:
        lines = ["// First comment", "int x = 5;", "/* Second comment */", "#pragma once"]
        units = list(CommentScanner().scan_lines(lines))
        assert _kinds(units) == [
            LexicalUnitKind.INLINE_COMMENT,
            LexicalUnitKind.BLOCK_COMMENT,
            LexicalUnitKind.PRAGMA,
        ]

    def test_empty_iterable(self) -> None:
        assert list(CommentScanner().scan_lines([])) == []

    def test_lazy(self) -> None:
        def lines():
            yield "// one"
            raise AssertionError("read past the first unit")

        units = CommentScanner().scan_lines(lines())
        assert next(units).text == " one"

    def test_match_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="slicewise"):
            scan_comments("x\n// y")
        assert any("Line 2: INLINE_COMMENT" in r.getMessage() for r in caplog.records)


class TestLineSplitting:
    def test_form_feed_stays_inside_block_comment(self) -> None:
        units = scan_comments("/* a\n\fb */")
        assert [u.text for u in units] == ["a\nb"]

    def test_form_feed_does_not_shift_line_numbers(self) -> None:
        with pytest.raises(UnterminatedCommentError) as exc_info:
            scan_comments("x\fy\v\u2028z\n/* open")
        assert exc_info.value.lineno == 2

    def test_crlf(self) -> None:
        units = scan_comments("// one\r\n/* two\r\n three */\r\n")
        assert [u.text for u in units] == [" one", "two\nthree"]


class TestUnterminated:
    def test_reports_opening_line(self) -> None:
        with pytest.raises(UnterminatedCommentError) as exc_info:
            scan_comments("int x;\n\n/* open\nnever closed")
        assert exc_info.value.lineno == 3
        assert str(exc_info.value).startswith("3 Unterminated comment")

    def test_file_reports_path(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.c"
        path.write_text("/* open\n", encoding="utf-8")
        with pytest.raises(UnterminatedCommentError) as exc_info:
            CommentScanner().scan_file(path)
        assert exc_info.value.source_file == str(path)
        assert str(exc_info.value).startswith(f"{path}:1 ")


class TestScanFile:
    def test_file(self, tmp_path: Path) -> None:
        path = tmp_path / "test.c"
        path.write_text(C_SOURCE, encoding="utf-8")
        assert CommentScanner().scan_file(path) == scan_comments(C_SOURCE)

    def test_str_path(self, tmp_path: Path) -> None:
        path = tmp_path / "one.c"
        path.write_text("// hi", encoding="utf-8")
        assert CommentScanner().scan_file(str(path))[0].text == " hi"

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.c"
        path.write_text("", encoding="utf-8")
        assert CommentScanner().scan_file(path) == []

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            CommentScanner().scan_file(tmp_path / "nonexistent.c")


class TestLexicalUnit:
    def test_new_instance(self) -> None:
        unit = LexicalUnit.new_instance(LexicalUnitKind.PRAGMA, "once")
        assert unit.kind is LexicalUnitKind.PRAGMA
        assert unit.text == "once"

    def test_no_validation(self) -> None:
        assert LexicalUnit.new_instance(LexicalUnitKind.INLINE_COMMENT, "").text == ""

    def test_frozen_and_hashable(self) -> None:
        unit = LexicalUnit.new_instance(LexicalUnitKind.PRAGMA, "once")
        with pytest.raises(AttributeError):
            unit.text = "twice"  # type: ignore[misc]
        assert len({unit, LexicalUnit(LexicalUnitKind.PRAGMA, "once")}) == 1

    def test_repr_truncates(self) -> None:
        unit = LexicalUnit(LexicalUnitKind.BLOCK_COMMENT, "x" * 30)
        assert repr(unit) == f"LexicalUnit(BLOCK_COMMENT, {'x' * 17 + '...'!r})"

    def test_custom_inline_rule_instance(self) -> None:
        assert InlineCommentRule("#").apply("# c", iter(())).text == " c"
