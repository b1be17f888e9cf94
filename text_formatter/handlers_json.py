from __future__ import annotations

import logging

import gradio as gr

from .config import DEFAULT_CONFIG
from .debounce import Debouncer, session_key
from .handlers_common import skip_outputs
from .history import append_history
from .json_format import transform_json
from .stats import text_stats

logger = logging.getLogger(__name__)

JSON_MODE_CHOICES = [("Formatted", "formatted"), ("Minified", "minified")]
JSON_ERROR_STATUS = "Invalid JSON. Check the syntax."

json_debouncer = Debouncer(DEFAULT_CONFIG.markup_debounce_seconds)


def process_json(raw, mode, history):
    if not raw or not raw.strip():
        return "", "", text_stats(""), history

    try:
        result = transform_json(raw, mode or "formatted")
    except ValueError as exc:
        logger.warning("JSON formatting failed: %s", exc)
        error_text = f"Error: {exc}"
        return error_text, JSON_ERROR_STATUS, text_stats(error_text), history

    history = append_history(history, "json", raw, result, limit=DEFAULT_CONFIG.history_limit)
    return result, "", text_stats(result), history


def process_json_debounced(raw, mode, history, request: gr.Request = None):
    return json_debouncer.call(
        session_key(request),
        process_json,
        raw,
        mode,
        history,
        superseded=skip_outputs(4),
    )


def reset_json():
    return "", "", "formatted", "", text_stats(""), text_stats("")
