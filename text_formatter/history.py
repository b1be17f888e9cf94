from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

DEFAULT_HISTORY_LIMIT = 50
PREVIEW_LENGTH = 80

HistoryEntry = Dict[str, Any]


def make_history_entry(
    kind: str,
    input_text: str,
    output_text: str,
    clock: Callable[[], float] = time.time,
) -> HistoryEntry:
    return {
        'type': kind,
        'input': input_text,
        'output': output_text,
        'timestamp': int(clock() * 1000),
    }


def append_history(
    history: Optional[List[HistoryEntry]],
    kind: str,
    input_text: str,
    output_text: str,
    limit: int = DEFAULT_HISTORY_LIMIT,
    clock: Callable[[], float] = time.time,
) -> List[HistoryEntry]:
    """Return a new history list with the entry first, capped at `limit`.

    The incoming list is left untouched so it can sit in a gr.State.
    """
    entry = make_history_entry(kind, input_text, output_text, clock)
    updated = [entry] + list(history or [])
    return updated[:max(0, int(limit))]


def clear_history() -> List[HistoryEntry]:
    return []


def _preview(text: str) -> str:
    text = ' '.join((text or '').split())
    if len(text) <= PREVIEW_LENGTH:
        return text
    return text[:PREVIEW_LENGTH - 1] + '…'


def history_rows(history: Optional[List[HistoryEntry]]) -> List[List[str]]:
    """Rows for the history table: type, UTC time, input and output previews."""
    rows: List[List[str]] = []
    for entry in history or []:
        stamp = datetime.fromtimestamp(entry.get('timestamp', 0) / 1000, tz=timezone.utc)
        rows.append([
            entry.get('type', ''),
            stamp.strftime('%Y-%m-%d %H:%M:%S'),
            _preview(entry.get('input', '')),
            _preview(entry.get('output', '')),
        ])
    return rows
