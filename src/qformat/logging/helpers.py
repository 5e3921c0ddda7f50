from __future__ import annotations

"""Small logging helpers to standardize qformat logger names, configuration and tracing.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Root logger configuration for the 'qformat' logger.
    - get_logger: Namespaced logger factory ('qformat.*').
    - parse_level: Level names from QFORMAT_LOG_LEVEL or the CLI.
    - render_trace_context / trace_render: per-argument render traces gated
      by QFORMAT_TRACE_RENDER.

The JSON payload carries a fixed 'version' field resolved from
qformat.__version__ when the formatter is built.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

from qformat.errors import ConfigError

BASE_LOGGER = "qformat"
TRACE_ENV = "QFORMAT_TRACE_RENDER"
TRACE_PREVIEW_CHARS = 60

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'qformat.render').
        - msg: Formatted message string.
        - version: qformat.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            # Lazy import; the package __init__ imports this module.
            from qformat import __version__ as _v
            return str(_v)
        except ImportError:
            return os.getenv("QFORMAT_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        payload = {
            "ts": ts_str,
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.WARNING, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'qformat' logger once and return it.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).

    Returns:
        The configured base logger.
    """
    base = logging.getLogger(BASE_LOGGER)
    if base.handlers:
        base.setLevel(level)
        return base

    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'qformat'."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")


def parse_level(raw: str) -> int:
    """Map a level name ("debug", "WARNING") or a numeric string to a level.

    Raises:
        ConfigError: If *raw* names no known level.
    """
    key = raw.strip().upper()
    if key.isdigit():
        return int(key)
    try:
        return LEVELS[key]
    except KeyError:
        raise ConfigError(f"unknown log level {raw!r}") from None


def is_trace_enabled() -> bool:
    """Check if per-argument render tracing is enabled via env flag."""
    return os.getenv(TRACE_ENV) == "1"


def render_trace_context(index: int, value: Any, text: str, kind: Any = None) -> Dict[str, Any]:
    """Describe one rendered argument for a trace record.

    Long renderings are cut to TRACE_PREVIEW_CHARS; 'length' keeps the full size.
    """
    preview = text if len(text) <= TRACE_PREVIEW_CHARS else text[:TRACE_PREVIEW_CHARS] + "…"
    ctx: Dict[str, Any] = {
        "index": index,
        "type": type(value).__name__,
        "preview": preview,
        "length": len(text),
    }
    if kind is not None:
        ctx["kind"] = getattr(kind, "value", kind)
    return ctx


def trace_render(logger: logging.Logger, message: str, **ctx) -> None:
    """Emit debug-verbosity render traces only when enabled.

    Args:
        logger: Target logger.
        message: Human-readable description.
        **ctx: Optional structured context attached to the record.
    """
    if not is_trace_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
