from __future__ import annotations


def text_stats(text: str) -> str:
    """Line and character counter shown under each text box."""
    text = text or ""
    lines = len(text.split("\n"))
    return f"{lines} lines • {len(text)} characters"
