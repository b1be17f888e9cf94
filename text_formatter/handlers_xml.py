from __future__ import annotations

import logging

import gradio as gr

from .config import DEFAULT_CONFIG
from .debounce import Debouncer, session_key
from .handlers_common import skip_outputs
from .history import append_history
from .stats import text_stats
from .xml_format import format_xml

logger = logging.getLogger(__name__)

XML_INDENT_CHOICES = ["2", "4", "8"]
XML_ERROR_STATUS = "Invalid XML. Check the syntax."

xml_debouncer = Debouncer(DEFAULT_CONFIG.markup_debounce_seconds)


def _indent_size(indent) -> int:
    try:
        return int(indent)
    except (TypeError, ValueError):
        return DEFAULT_CONFIG.default_xml_indent


def process_xml(raw, indent, history):
    if not raw or not raw.strip():
        return "", "", text_stats(""), history

    try:
        formatted = format_xml(raw, _indent_size(indent))
    except ValueError as exc:
        logger.warning("XML formatting failed: %s", exc)
        error_text = f"Error: {exc}"
        return error_text, XML_ERROR_STATUS, text_stats(error_text), history

    history = append_history(history, "xml", raw, formatted, limit=DEFAULT_CONFIG.history_limit)
    return formatted, "", text_stats(formatted), history


def process_xml_debounced(raw, indent, history, request: gr.Request = None):
    return xml_debouncer.call(
        session_key(request),
        process_xml,
        raw,
        indent,
        history,
        superseded=skip_outputs(4),
    )


def reset_xml():
    return "", "", str(DEFAULT_CONFIG.default_xml_indent), "", text_stats(""), text_stats("")
