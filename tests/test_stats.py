from __future__ import annotations

from text_formatter.stats import text_stats


def test_text_stats_counts_lines_and_characters() -> None:
    assert text_stats("a\nb") == "2 lines • 3 characters"


def test_text_stats_empty_text_is_one_line() -> None:
    assert text_stats("") == "1 lines • 0 characters"
    assert text_stats(None) == "1 lines • 0 characters"
