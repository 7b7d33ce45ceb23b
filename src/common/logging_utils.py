"""Centralized logging helpers.

Every module obtains its logger with ``logging.getLogger(__name__)``; this
module owns handler setup for the CLI plus a few helpers used for DEBUG
traces (structured ``extra`` payloads, URL redaction and timing).
"""
from __future__ import annotations

import logging
import os
import sys
import time
from typing import Any, Dict, List, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from constants import Constants

_SENSITIVE_QUERY_KEYS = {"access_token", "token", "password", "private_token", "key"}

# Handlers added by configure_logging, replaced on reconfiguration
_installed_handlers: List[logging.Handler] = []


def configure_logging(level: Optional[str] = None, logfile: Optional[str] = None) -> None:
    """Configure root logging for the CLI.

    Diagnostics always go to stderr so that stdout carries only the report.

    Args:
        level: Level name; falls back to MODDIFF_LOG_LEVEL, then INFO.
        logfile: Optional path of an additional log file.
    """
    level_name = (level or os.environ.get(Constants.ENV_LOG_LEVEL) or "INFO").upper()
    level_value = getattr(logging, level_name, logging.INFO)
    if not isinstance(level_value, int):
        level_value = logging.INFO
    # Fatal diagnostics are logged at ERROR and must always reach stderr
    level_value = min(level_value, logging.ERROR)

    root = logging.getLogger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(Constants.LOG_FORMAT)
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)
    _installed_handlers.append(stream_handler)

    if logfile:
        file_handler = logging.FileHandler(logfile, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    root.setLevel(level_value)

    # Quiet chatty transport loggers unless tracing
    if level_value > logging.DEBUG:
        logging.getLogger("urllib3").setLevel(logging.WARNING)


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when DEBUG records would be emitted by ``logger``."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build an ``extra`` mapping for structured DEBUG traces.

    None values are dropped so formatters never see empty attributes.
    """
    return {key: value for key, value in fields.items() if value is not None}


def safe_url(url: str) -> str:
    """Return ``url`` with embedded credentials and token query values redacted."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return "<invalid-url>"

    netloc = parts.netloc
    if "@" in netloc:
        netloc = "***@" + netloc.rsplit("@", 1)[1]

    query = parts.query
    if query:
        pairs = [
            (key, "***" if key.lower() in _SENSITIVE_QUERY_KEYS else value)
            for key, value in parse_qsl(query, keep_blank_values=True)
        ]
        query = urlencode(pairs)

    return urlunsplit((parts.scheme, netloc, parts.path, query, parts.fragment))


class Timer:
    """Context manager measuring elapsed wall time in milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self._end = time.perf_counter()

    def duration_ms(self) -> int:
        """Elapsed milliseconds, measured up to now while still inside the block."""
        end = self._end if self._end is not None else time.perf_counter()
        return int((end - self._start) * 1000)
