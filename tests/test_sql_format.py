from __future__ import annotations

from typing import List, Tuple

import pytest

from text_formatter.sql_format import (
    COMPACT_BREAKERS,
    FORMAT_PRESETS,
    SqlFormatOptions,
    SqlFormattingError,
    apply_case_transform,
    compactify,
    compress_empty_lines,
    format_sql,
    is_compact_break_line,
    move_logical_operators_after,
    passthrough_pretty_print,
)


class RecordingPrinter:
    def __init__(self, output: str = None):
        self.output = output
        self.calls: List[Tuple[str, SqlFormatOptions]] = []

    def __call__(self, sql: str, options: SqlFormatOptions) -> str:
        self.calls.append((sql, options))
        return sql if self.output is None else self.output


def test_presets_match_expected_settings() -> None:
    readable = FORMAT_PRESETS["readable"]
    compact = FORMAT_PRESETS["compact"]
    assert FORMAT_PRESETS["minimal"] is None

    assert readable.keyword_case == "upper"
    assert readable.indent_width == 2
    assert readable.expression_width == 110
    assert readable.dense_operators is False
    assert readable.logical_operator_newline == "before"

    assert compact.expression_width == 200
    assert compact.dense_operators is True
    assert compact.logical_operator_newline == "after"
    assert compact.lines_between_queries == 1


def test_compress_empty_lines() -> None:
    assert compress_empty_lines("a\n\n\nb") == "a\nb"
    assert compress_empty_lines("a\r\n\r\nb") == "a\nb"
    assert compress_empty_lines("a\n  \n b") == "a\n b"
    assert compress_empty_lines("a\nb") == "a\nb"


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("SELECT a", True),
        ("select a", True),
        ("FROM", True),
        ("left join t", True),
        ("FROMAGE", False),
        ("a,", False),
        (")", False),
    ],
)
def test_is_compact_break_line(line: str, expected: bool) -> None:
    assert is_compact_break_line(line) is expected


def test_compact_breakers_cover_clause_keywords() -> None:
    assert len(COMPACT_BREAKERS) == 18
    assert {"SELECT", "WITH", "UNION", "END"} <= set(COMPACT_BREAKERS)


def test_compactify_merges_continuation_lines() -> None:
    text = "SELECT a,\n       b\nFROM t\nWHERE x = 1 AND\n  y = 2"
    assert compactify(text) == "SELECT a, b\nFROM t\nWHERE x = 1 AND y = 2"


def test_compactify_keeps_lone_closing_paren_on_its_own_line() -> None:
    text = "SELECT *\nFROM (\n  SELECT 1\n)\nx"
    assert compactify(text) == "SELECT *\nFROM (\nSELECT 1\n) x"


def test_compactify_edge_cases() -> None:
    assert compactify("") == ""
    assert compactify("\n  \n") == ""
    assert compactify("a\nb") == "a b"


@pytest.mark.parametrize(
    ("mode", "expected"),
    [("upper", "SELECT A"), ("lower", "select a"), ("normal", "Select a"), ("other", "Select a")],
)
def test_apply_case_transform(mode: str, expected: str) -> None:
    assert apply_case_transform("Select a", mode) == expected


def test_apply_case_transform_empty() -> None:
    assert apply_case_transform("", "upper") == ""


def test_move_logical_operators_after() -> None:
    text = "WHERE a = 1\n  AND b = 2\n  OR c = 3"
    assert move_logical_operators_after(text) == "WHERE a = 1 AND\n  b = 2 OR\n  c = 3"


def test_format_sql_blank_input() -> None:
    printer = RecordingPrinter()
    assert format_sql("   ", "readable", "upper", printer) == ""
    assert printer.calls == []


def test_format_sql_minimal_skips_pretty_printer() -> None:
    printer = RecordingPrinter()
    result = format_sql("'select 1' +\n'from t'", "minimal", "normal", printer)
    assert result == "select 1 from t"
    assert printer.calls == []


def test_format_sql_unknown_style_behaves_like_minimal() -> None:
    printer = RecordingPrinter()
    assert format_sql("select 1", "fancy", "normal", printer) == "select 1"
    assert printer.calls == []


def test_format_sql_passes_cleaned_text_and_preset() -> None:
    printer = RecordingPrinter()
    format_sql("'SELECT *' +\n'FROM users'", "readable", "normal", printer)
    assert printer.calls == [("SELECT * FROM users", FORMAT_PRESETS["readable"])]


def test_format_sql_compact_remerges_after_pretty_print() -> None:
    printer = RecordingPrinter("SELECT a,\n\n\n  b\nFROM t\nWHERE x = 1 AND\n  y = 2")
    result = format_sql("select a, b from t where x = 1 and y = 2", "compact", "normal", printer)
    assert result == "SELECT a, b\nFROM t\nWHERE x = 1 AND y = 2"


def test_format_sql_applies_case_transform_last() -> None:
    result = format_sql("'select 1' +\n'from t'", "readable", "lower", passthrough_pretty_print)
    assert result == "select 1 from t"


def test_format_sql_wraps_pretty_printer_errors() -> None:
    def broken(sql: str, options: SqlFormatOptions) -> str:
        raise RuntimeError("boom")

    with pytest.raises(SqlFormattingError, match="boom"):
        format_sql("select 1", "readable", "normal", broken)
    assert issubclass(SqlFormattingError, ValueError)


def test_format_sql_readable_with_sqlparse() -> None:
    result = format_sql("select * from users where id = 1", "readable")
    assert result.splitlines() == ["SELECT *", "FROM users", "WHERE id = 1"]


def test_format_sql_separates_statements() -> None:
    result = format_sql("select 1; select 2", "readable")
    assert result == "SELECT 1;\nSELECT 2"


def test_format_sql_compact_keeps_existing_operator_spacing() -> None:
    result = format_sql("select * from t where x = 1 and y=2", "compact")
    assert result == "SELECT *\nFROM t\nWHERE x = 1 AND y=2"
