from __future__ import annotations

"""Exception types raised at the configuration boundary.

Formatting itself never raises for arity mismatches or unsupported values;
these errors only surface while building settings (locale lookup, env/CLI
parsing).
"""


class QFormatError(ValueError):
    """Base class for qformat configuration errors."""


class UnknownLocaleError(QFormatError):
    """Raised when a locale name cannot be resolved on this system."""

    def __init__(self, name: str, reason: str = '') -> None:
        self.name = name
        msg = f'unknown locale {name!r}'
        if reason:
            msg = f'{msg}: {reason}'
        super().__init__(msg)


class ConfigError(QFormatError):
    """Raised for malformed configuration values (flags, precision, ...)."""
