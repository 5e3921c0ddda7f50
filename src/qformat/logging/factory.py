from __future__ import annotations

import logging
from typing import Any, Optional, TextIO

from qformat.core.interfaces.logging import LoggerFactoryProtocol
from qformat.logging.helpers import get_logger, is_trace_enabled, setup_base_logger


class DefaultLoggerFactory(LoggerFactoryProtocol):
    """Factory that configures and returns ``qformat.*`` loggers.

    The base handler is installed on first use, so building a factory has no
    side effects. Formatter, CLI and tests obtain loggers through the same
    handler setup.
    """

    def __init__(self, *, json_logs: bool = False, level: int = logging.WARNING,
                 stream: Optional[TextIO] = None) -> None:
        self._json = bool(json_logs)
        self._level = int(level)
        self._stream: Optional[TextIO] = stream
        self._configured = False

    @classmethod
    def from_config(cls, config: Any, *, stream: Optional[TextIO] = None) -> 'DefaultLoggerFactory':
        """Build a factory from any object with ``json_logs`` and ``log_level``.

        Render tracing (QFORMAT_TRACE_RENDER=1) emits at DEBUG, so it lowers
        the level to DEBUG when enabled.
        """
        level = int(getattr(config, 'log_level', logging.WARNING))
        if is_trace_enabled():
            level = min(level, logging.DEBUG)
        return cls(json_logs=bool(getattr(config, 'json_logs', False)), level=level, stream=stream)

    @property
    def level(self) -> int:
        return self._level

    def _ensure_config(self) -> None:
        if self._configured:
            return
        base = setup_base_logger(json_logs=self._json, level=self._level, stream=self._stream)
        base.debug('logging configured: json=%s level=%s', self._json, logging.getLevelName(self._level))
        self._configured = True

    def get_logger(self, name: str) -> logging.Logger:
        self._ensure_config()
        return get_logger(name)
