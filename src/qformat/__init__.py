from __future__ import annotations

import logging
from typing import Any, Optional

from qformat.constants import ESCAPE_PREFIX, PLACEHOLDER, UNKNOWN_MARKER
from qformat.core.models import FmtFlags, NumericLocale, OutputSettings, Pair, ValueKind, Verbatim
from qformat.errors import ConfigError, QFormatError, UnknownLocaleError
from qformat.formatter import Formatter
from qformat.logging.helpers import get_logger
from qformat.processing.placeholder_scanner import PlaceholderScanner
from qformat.rendering.numeric import NumberFormatter
from qformat.rendering.template_engine import PlaceholderTemplateEngine
from qformat.rendering.value_renderer import ValueRenderer
from qformat.runtime.config import FormatterConfig

__version__ = '1.0.0'

_DEFAULT_FORMATTER: Optional[Formatter] = None


def formatter_factory(
    *,
    config: Optional[FormatterConfig] = None,
    renderer: Optional[ValueRenderer] = None,
    logger: Optional[logging.Logger] = None,
) -> Formatter:
    """Factory helper that returns a concrete Formatter.

    Falls back to the environment config and the default ValueRenderer when
    none is provided.
    """
    cfg = config or FormatterConfig.from_env()
    lg = logger or get_logger('formatter')
    engine = PlaceholderTemplateEngine(renderer=renderer or ValueRenderer(logger=logger), logger=logger)
    return Formatter.from_config(cfg, engine=engine, logger=lg)


def format(template: str, *args: Any) -> str:  # noqa: A001
    """Format with a process-wide Formatter built from QFORMAT_* variables."""
    global _DEFAULT_FORMATTER
    if _DEFAULT_FORMATTER is None:
        _DEFAULT_FORMATTER = formatter_factory()
    return _DEFAULT_FORMATTER.format(template, *args)


__all__ = [
    'ESCAPE_PREFIX',
    'PLACEHOLDER',
    'UNKNOWN_MARKER',
    'ConfigError',
    'FmtFlags',
    'Formatter',
    'FormatterConfig',
    'NumberFormatter',
    'NumericLocale',
    'OutputSettings',
    'Pair',
    'PlaceholderScanner',
    'PlaceholderTemplateEngine',
    'QFormatError',
    'UnknownLocaleError',
    'ValueKind',
    'ValueRenderer',
    'Verbatim',
    'format',
    'formatter_factory',
]
