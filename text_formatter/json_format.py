from __future__ import annotations

import json
from typing import Any

JSON_MODES = ("formatted", "minified")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON: {name} is not a valid JSON value")


def parse_json_text(text: str) -> Any:
    """Parse strict JSON, turning decoder errors into a readable ValueError.

    NaN and Infinity are rejected.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON: {exc.msg} at line {exc.lineno}, column {exc.colno}") from exc
    except RecursionError as exc:
        raise ValueError("Invalid JSON: nesting is too deep") from exc


def _dump(value: Any, **kwargs) -> str:
    try:
        return json.dumps(value, ensure_ascii=False, **kwargs)
    except RecursionError as exc:
        raise ValueError("Invalid JSON: nesting is too deep") from exc


def format_json(text: str) -> str:
    if not text or not text.strip():
        return ""
    return _dump(parse_json_text(text), indent=2)


def minify_json(text: str) -> str:
    if not text or not text.strip():
        return ""
    return _dump(parse_json_text(text), separators=(",", ":"))


def transform_json(text: str, mode: str = "formatted") -> str:
    if mode not in JSON_MODES:
        raise ValueError(f"Unknown JSON output mode: {mode}")
    if mode == "minified":
        return minify_json(text)
    return format_json(text)
