from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from qformat.constants import DEFAULT_PRECISION, ENV_PREFIX
from qformat.core.models import FmtFlags
from qformat.errors import ConfigError
from qformat.logging.helpers import parse_level


def _parse_precision(raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigError(f'precision must be an integer (got {raw!r})') from None


@dataclass(frozen=True)
class FormatterConfig:
    """Immutable configuration blob used to seed a Formatter and its logging."""
    precision: int = DEFAULT_PRECISION
    flags: FmtFlags = field(default_factory=FmtFlags.default)
    locale: str = 'C'
    json_logs: bool = False
    log_level: int = logging.WARNING

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'FormatterConfig':
        """Build a config from QFORMAT_* variables; unset ones keep defaults.

        Recognized variables: QFORMAT_PRECISION, QFORMAT_FLAGS,
        QFORMAT_LOCALE, QFORMAT_JSON_LOGS ("1" enables), QFORMAT_LOG_LEVEL.

        Raises:
            ConfigError: If a variable holds a malformed value.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        def _get(name: str) -> str:
            return (env.get(ENV_PREFIX + name) or '').strip()

        precision = _get('PRECISION')
        flags = _get('FLAGS')
        level = _get('LOG_LEVEL')
        return cls(
            precision=_parse_precision(precision) if precision else defaults.precision,
            flags=FmtFlags.parse(flags) if flags else defaults.flags,
            locale=_get('LOCALE') or defaults.locale,
            json_logs=_get('JSON_LOGS') == '1',
            log_level=parse_level(level) if level else defaults.log_level,
        )
