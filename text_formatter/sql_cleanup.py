from __future__ import annotations

import logging
import re
from typing import List

logger = logging.getLogger(__name__)

BREAK_PAIR_RE = re.compile(r'#13#10|#10#13', re.IGNORECASE)
BREAK_SINGLE_RE = re.compile(r'#13|#10', re.IGNORECASE)
WHITESPACE_RE = re.compile(r'\s+')
CODE_ARTIFACT_RE = re.compile(r'(\+|&|\.\.)|#13|#10|\\')

LINE_SPLIT_RE = re.compile(r'\n+')
LEADING_CONNECTOR_RE = re.compile(r'^(\+|&|\.\.)\s*')
TRAILING_CONNECTOR_RE = re.compile(r'\s*(\+|&|\.\.)$')
LINE_COMMENT_RE = re.compile(r'\s*//.*$')
CONNECTOR_ONLY_RE = re.compile(r'^(?:\+|&|\.\.)+$')

QUOTE_CHARS = ("'", '"')


def normalize_break_tokens(text: str) -> str:
    """Turn Delphi-style `#13#10` break codes back into real newlines."""
    text = BREAK_PAIR_RE.sub('\n', text)
    return BREAK_SINGLE_RE.sub('\n', text)


def strip_backslashes(text: str) -> str:
    return text.replace('\\', '')


def collapse_whitespace(text: str) -> str:
    return WHITESPACE_RE.sub(' ', text).strip()


def has_code_artifacts(text: str) -> bool:
    """True when the text looks like host-language source rather than plain SQL.

    Any concatenation operator (`+`, `&`, `..`), break code or backslash counts.
    """
    return CODE_ARTIFACT_RE.search(text) is not None


def strip_connectors(line: str) -> str:
    """Drop one leading and one trailing concatenation operator."""
    line = LEADING_CONNECTOR_RE.sub('', line, count=1)
    return TRAILING_CONNECTOR_RE.sub('', line, count=1)


def strip_line_comment(line: str) -> str:
    return LINE_COMMENT_RE.sub('', line, count=1)


def remove_outer_quotes(chunk: str) -> str:
    """Remove one layer of matching outer quotes and un-double the inner ones.

    `'it''s'` becomes `it's`; doubled double quotes inside a double-quoted
    chunk are collapsed the same way.
    Chunks shorter than two characters, or without a matching pair, are
    returned untouched.
    """
    if len(chunk) < 2:
        return chunk
    first, last = chunk[0], chunk[-1]
    if first != last or first not in QUOTE_CHARS:
        return chunk
    body = chunk[1:-1]
    return body.replace(first * 2, first)


def strip_dangling_quote(chunk: str) -> str:
    """Drop a lone quote left at exactly one end of the chunk."""
    if not chunk:
        return chunk
    first_is_quote = chunk[0] in QUOTE_CHARS
    last_is_quote = chunk[-1] in QUOTE_CHARS
    if first_is_quote and not last_is_quote:
        return chunk[1:]
    if last_is_quote and not first_is_quote:
        return chunk[:-1]
    return chunk


def is_connector_only(line: str) -> bool:
    return CONNECTOR_ONLY_RE.match(WHITESPACE_RE.sub('', line)) is not None


def split_fragments(text: str) -> List[str]:
    """Split normalized text into purified fragments, one per source line."""
    fragments: List[str] = []
    for line in LINE_SPLIT_RE.split(text):
        line = line.strip()
        if not line:
            continue
        line = strip_connectors(line)
        line = strip_line_comment(line)
        line = remove_outer_quotes(line)
        line = strip_dangling_quote(line)
        line = line.strip()
        if not line or is_connector_only(line):
            continue
        fragments.append(line)
    return fragments


def clean_sql(raw: str) -> str:
    """Recover a single SQL string from pasted source-code fragments.

    Handles string literals glued together with `+`, `&` or `..`, doubled
    quote escapes, `#13#10` break codes, backslashes and trailing `//`
    comments. Text without any of those artifacts is only whitespace-collapsed.
    This is a best-effort heuristic and never raises.
    """
    if not raw or not raw.strip():
        return ''

    normalized = strip_backslashes(normalize_break_tokens(raw))
    if not has_code_artifacts(raw):
        return collapse_whitespace(normalized)

    fragments = split_fragments(normalized)
    if not fragments:
        return collapse_whitespace(normalized)

    logger.debug("Recovered %d SQL fragments", len(fragments))
    return collapse_whitespace(' '.join(fragments))
