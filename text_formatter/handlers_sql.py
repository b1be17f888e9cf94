from __future__ import annotations

import logging

import gradio as gr

from .config import DEFAULT_CONFIG
from .debounce import Debouncer, session_key
from .handlers_common import skip_outputs
from .history import append_history
from .sql_format import SqlFormattingError, format_sql
from .stats import text_stats

logger = logging.getLogger(__name__)

SQL_STYLE_CHOICES = [("Readable", "readable"), ("Compact", "compact"), ("Minimal (clean only)", "minimal")]
SQL_CASE_CHOICES = [("Keep", "normal"), ("UPPERCASE", "upper"), ("lowercase", "lower")]
SQL_ERROR_STATUS = "Error formatting SQL. Check the syntax."

sql_debouncer = Debouncer(DEFAULT_CONFIG.sql_debounce_seconds)


def process_sql(raw, format_style, case_style, history):
    if not raw or not raw.strip():
        return "", "", text_stats(""), history

    try:
        formatted = format_sql(raw, format_style or "readable", case_style or "normal")
    except SqlFormattingError:
        logger.exception("SQL pretty printer failed")
        return "", SQL_ERROR_STATUS, text_stats(""), history

    history = append_history(history, "sql", raw, formatted, limit=DEFAULT_CONFIG.history_limit)
    return formatted, "", text_stats(formatted), history


def process_sql_debounced(raw, format_style, case_style, history, request: gr.Request = None):
    return sql_debouncer.call(
        session_key(request),
        process_sql,
        raw,
        format_style,
        case_style,
        history,
        superseded=skip_outputs(4),
    )


def reset_sql():
    return "", "", "readable", "normal", "", text_stats(""), text_stats("")
