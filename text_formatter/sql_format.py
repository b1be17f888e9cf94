from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

import sqlparse

from .sql_cleanup import clean_sql

logger = logging.getLogger(__name__)


class SqlFormattingError(ValueError):
    """Raised when the pretty printer fails on the cleaned SQL."""


@dataclass(frozen=True)
class SqlFormatOptions:
    """Pretty-printer settings bundled under a preset name."""

    language: str = 'sql'
    lines_between_queries: int = 1
    keyword_case: str = 'upper'
    expression_width: int = 110
    dense_operators: bool = False
    indent_width: int = 2
    logical_operator_newline: str = 'before'


FORMAT_PRESETS: Dict[str, Optional[SqlFormatOptions]] = {
    'readable': SqlFormatOptions(
        expression_width=110,
        dense_operators=False,
        logical_operator_newline='before',
    ),
    'compact': SqlFormatOptions(
        expression_width=200,
        dense_operators=True,
        logical_operator_newline='after',
    ),
    'minimal': None,
}

COMPACT_BREAKERS = (
    'SELECT',
    'FROM',
    'WHERE',
    'GROUP',
    'ORDER',
    'HAVING',
    'WHEN',
    'THEN',
    'ELSE',
    'END',
    'JOIN',
    'LEFT',
    'RIGHT',
    'INNER',
    'OUTER',
    'UNION',
    'CASE',
    'WITH',
)

LOGICAL_OPERATORS = ('AND', 'OR')

PrettyPrinter = Callable[[str, SqlFormatOptions], str]

EMPTY_LINES_RE = re.compile(r'\n(?:\s*\n)+')


def move_logical_operators_after(text: str) -> str:
    """Move a leading AND/OR onto the end of the previous line."""
    lines: List[str] = []
    for line in text.split('\n'):
        stripped = line.lstrip()
        indent = line[:len(line) - len(stripped)]
        head, _, rest = stripped.partition(' ')
        if lines and head.upper() in LOGICAL_OPERATORS:
            lines[-1] = f"{lines[-1]} {head}"
            if rest:
                lines.append(f"{indent}{rest}")
            continue
        lines.append(line)
    return '\n'.join(lines)


def sqlparse_pretty_print(sql: str, options: SqlFormatOptions) -> str:
    """Default pretty printer backed by sqlparse.

    `dense_operators` only stops sqlparse from adding spaces around
    operators; spacing already in the input is kept as written, so the
    compact preset is not guaranteed to squeeze `a = 1` into `a=1`.
    """
    statements = [s for s in sqlparse.split(sql) if s.strip()]
    formatted: List[str] = []
    for statement in statements:
        out = sqlparse.format(
            statement,
            reindent=True,
            keyword_case=options.keyword_case,
            indent_width=options.indent_width,
            wrap_after=options.expression_width,
            use_space_around_operators=not options.dense_operators,
        )
        if options.logical_operator_newline == 'after':
            out = move_logical_operators_after(out)
        formatted.append(out.strip())
    separator = '\n' * (max(0, options.lines_between_queries) + 1)
    return separator.join(formatted)


def passthrough_pretty_print(sql: str, options: SqlFormatOptions) -> str:
    return sql


def compress_empty_lines(text: str) -> str:
    return EMPTY_LINES_RE.sub('\n', text.replace('\r\n', '\n'))


def is_compact_break_line(line: str) -> bool:
    upper = line.upper()
    return any(upper == kw or upper.startswith(f"{kw} ") for kw in COMPACT_BREAKERS)


def compactify(text: str) -> str:
    """Re-merge pretty-printed lines so only clause keywords start a new line.

    A line that is a clause keyword (or a lone `)`) starts a new line; anything
    else is appended to the line before it.
    """
    lines = [line.strip() for line in text.split('\n')]
    lines = [line for line in lines if line]
    merged: List[str] = []
    for line in lines:
        if not merged or is_compact_break_line(line) or line == ')':
            merged.append(line)
        else:
            merged[-1] = f"{merged[-1]} {line}"
    return '\n'.join(merged)


def apply_case_transform(text: str, mode: str) -> str:
    if not text:
        return text
    if mode == 'upper':
        return text.upper()
    if mode == 'lower':
        return text.lower()
    return text


def format_sql(
    raw: str,
    style: str = 'readable',
    case_mode: str = 'normal',
    pretty_printer: PrettyPrinter = sqlparse_pretty_print,
) -> str:
    """Clean pasted SQL, pretty-print it with a preset and apply a case transform.

    Unknown style names skip the pretty-print pass like `minimal` does.
    Pretty-printer failures are re-raised as SqlFormattingError.
    """
    if not raw or not raw.strip():
        return ''

    formatted = clean_sql(raw)
    if formatted:
        preset = FORMAT_PRESETS.get(style)
        if preset is not None:
            try:
                formatted = pretty_printer(formatted, preset)
            except Exception as exc:
                raise SqlFormattingError(f"Could not format SQL: {exc}") from exc
            formatted = compress_empty_lines(formatted)
        if style == 'compact':
            formatted = compactify(formatted)

    return apply_case_transform(formatted, case_mode)
