from __future__ import annotations

from .history import clear_history, history_rows


def render_history(history):
    rows = history_rows(history)
    count = len(history or [])
    return rows, f"{count} entries"


def clear_history_handler():
    history = clear_history()
    rows, status = render_history(history)
    return history, rows, status
