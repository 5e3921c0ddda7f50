from __future__ import annotations

"""Stateful formatter: output settings plus the ``%?`` template engine.

Example:
    >>> fmt = Formatter()
    >>> fmt.format("Num value: %?, string value: %?", 10.5, "xyz")
    'Num value: 10.5, string value: xyz'

Settings changed through the accessors apply to the next ``format`` call.
A Formatter is not synchronized; share one per thread or guard mutations.
"""

import logging
from typing import Any, Optional, Union

from qformat.constants import DEFAULT_PRECISION, PLACEHOLDER
from qformat.core.interfaces.templating import TemplateEngineProtocol
from qformat.core.models import FmtFlags, NumericLocale, OutputSettings, Verbatim
from qformat.logging.helpers import get_logger
from qformat.rendering.template_engine import PlaceholderTemplateEngine
from qformat.runtime.config import FormatterConfig

LocaleLike = Union[NumericLocale, str]


def _as_locale(loc: LocaleLike) -> NumericLocale:
    if isinstance(loc, NumericLocale):
        return loc
    return NumericLocale.from_name(loc)


class Formatter:
    """Fill templates with formatted arguments.

    The format specifier is ``%?``; ``%%?`` stands for a literal ``%?``.
    Arguments are rendered according to their capabilities (booleans as
    true/false, numbers under the current precision/flags/locale, pairs as
    ``{a : b}``, iterables as ``[a, b]``) and anything else as ``?``.
    """

    def __init__(
        self,
        locale: Optional[LocaleLike] = None,
        flags: Optional[FmtFlags] = None,
        precision: int = DEFAULT_PRECISION,
        *,
        engine: Optional[TemplateEngineProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._log = logger or get_logger('formatter')
        self._engine = engine or PlaceholderTemplateEngine(logger=logger)
        self._settings = OutputSettings(
            flags=FmtFlags.default() if flags is None else FmtFlags(flags),
            precision=int(precision),
            locale=NumericLocale.classic() if locale is None else _as_locale(locale),
        )

    @classmethod
    def from_config(cls, config: FormatterConfig, **kwargs: Any) -> 'Formatter':
        """Build a Formatter seeded from a FormatterConfig."""
        return cls(locale=config.locale, flags=config.flags, precision=config.precision, **kwargs)

    # ------------------------------------------------------------------ #
    #  Formatting                                                        #
    # ------------------------------------------------------------------ #
    def format(self, template: str, *args: Any) -> str:
        """Return *template* with each ``%?`` replaced by the next argument."""
        if not args and isinstance(template, str) and PLACEHOLDER not in template:
            return template
        return self._engine.render(template, args, self._settings)

    @staticmethod
    def output(value: Any) -> Verbatim:
        """Wrap *value* so it is rendered through its own conversion.

        Use it for values that would otherwise render as a pair or a list:

            >>> Formatter().format('%?', Formatter.output(my_record))
        """
        return Verbatim(value)

    @property
    def settings(self) -> OutputSettings:
        """Snapshot of the settings the next ``format`` call will use."""
        return self._settings

    # ------------------------------------------------------------------ #
    #  Flags                                                             #
    # ------------------------------------------------------------------ #
    def get_flags(self) -> FmtFlags:
        return self._settings.flags

    def set_flags(self, flags: FmtFlags) -> FmtFlags:
        """Replace the flag set; return the previous one."""
        return self._replace_flags(FmtFlags(int(flags)))

    def enable_flags(self, flags: FmtFlags) -> FmtFlags:
        """Turn on *flags*, leaving the others untouched; return the previous set."""
        return self._replace_flags(FmtFlags(int(self._settings.flags) | int(flags)))

    def set_flags_masked(self, flags: FmtFlags, mask: FmtFlags) -> FmtFlags:
        """Clear the flags under *mask*, then set those of *flags* within *mask*.

        Typical use is switching radix or float notation:

            >>> fmt.set_flags_masked(FmtFlags.HEX, FmtFlags.BASEFIELD)
        """
        current = int(self._settings.flags)
        return self._replace_flags(FmtFlags((current & ~int(mask)) | (int(flags) & int(mask))))

    def clear_flags(self, flags: FmtFlags) -> None:
        self._replace_flags(FmtFlags(int(self._settings.flags) & ~int(flags)))

    def _replace_flags(self, flags: FmtFlags) -> FmtFlags:
        previous = self._settings.flags
        self._settings = self._settings.evolve(flags=flags)
        return previous

    # ------------------------------------------------------------------ #
    #  Locale & precision                                                #
    # ------------------------------------------------------------------ #
    def get_locale(self) -> NumericLocale:
        return self._settings.locale

    def set_locale(self, locale: LocaleLike) -> NumericLocale:
        """Use *locale* (a NumericLocale or a system locale name); return the previous one.

        Raises:
            UnknownLocaleError: If a locale name cannot be resolved.
        """
        previous = self._settings.locale
        self._settings = self._settings.evolve(locale=_as_locale(locale))
        self._log.debug('locale changed: %s -> %s', previous.name, self._settings.locale.name)
        return previous

    def get_precision(self) -> int:
        return self._settings.precision

    def set_precision(self, precision: int) -> int:
        """Set how many digits floating point output generates; return the previous value."""
        previous = self._settings.precision
        self._settings = self._settings.evolve(precision=int(precision))
        return previous
