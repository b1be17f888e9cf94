from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

logger = logging.getLogger(__name__)

ENV_PREFIX = "TEXT_FORMATTER_"


@dataclass
class FormatterConfig:
    """Runtime settings for the formatter app."""

    sql_debounce_seconds: float = 0.2
    markup_debounce_seconds: float = 0.3
    history_limit: int = 50
    default_xml_indent: int = 2
    log_level: str = "INFO"


def _read(environ: Mapping[str, str], name: str, cast: Callable, default):
    raw = environ.get(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        logger.warning("Ignoring invalid %s%s=%r, using %r", ENV_PREFIX, name, raw, default)
        return default


def load_config(environ: Optional[Mapping[str, str]] = None) -> FormatterConfig:
    """Build a FormatterConfig, overriding defaults from TEXT_FORMATTER_* variables."""
    if environ is None:
        environ = os.environ
    defaults = FormatterConfig()
    return FormatterConfig(
        sql_debounce_seconds=_read(environ, "SQL_DEBOUNCE", float, defaults.sql_debounce_seconds),
        markup_debounce_seconds=_read(environ, "MARKUP_DEBOUNCE", float, defaults.markup_debounce_seconds),
        history_limit=_read(environ, "HISTORY_LIMIT", int, defaults.history_limit),
        default_xml_indent=_read(environ, "XML_INDENT", int, defaults.default_xml_indent),
        log_level=_read(environ, "LOG_LEVEL", str.upper, defaults.log_level),
    )


DEFAULT_CONFIG = load_config()
