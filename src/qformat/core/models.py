import enum
import locale as _locale
from dataclasses import dataclass, field, replace
from typing import Any, NamedTuple, Tuple

from qformat.constants import DEFAULT_PRECISION
from qformat.errors import ConfigError, UnknownLocaleError


class FmtFlags(enum.IntFlag):
    """Output format flags, modelled after stream format flags.

    ``SKIPWS`` only matters for input streams; it is kept so the default set
    and masks line up with what callers expect.
    """
    NONE = 0
    SKIPWS = 1 << 0
    DEC = 1 << 1
    OCT = 1 << 2
    HEX = 1 << 3
    FIXED = 1 << 4
    SCIENTIFIC = 1 << 5
    SHOWBASE = 1 << 6
    SHOWPOINT = 1 << 7
    SHOWPOS = 1 << 8
    UPPERCASE = 1 << 9

    BASEFIELD = DEC | OCT | HEX
    FLOATFIELD = FIXED | SCIENTIFIC

    @classmethod
    def default(cls) -> 'FmtFlags':
        return cls.SKIPWS | cls.DEC

    @classmethod
    def parse(cls, spec: str) -> 'FmtFlags':
        """Parse a comma/pipe separated list of flag names ("hex,showbase").

        Raises:
            ConfigError: If a name is not a known flag.
        """
        result = cls.NONE
        for raw in (spec or '').replace('|', ',').split(','):
            name = raw.strip().upper()
            if not name:
                continue
            try:
                result |= cls[name]
            except KeyError:
                raise ConfigError(f'unknown format flag {raw.strip()!r}') from None
        return result


@dataclass(frozen=True)
class NumericLocale:
    """Numeric conventions of a locale: decimal point and digit grouping.

    ``grouping`` follows ``locale.localeconv()``: group sizes from the right,
    a trailing ``0`` repeats the last size, ``locale.CHAR_MAX`` stops grouping.
    """
    name: str = 'C'
    decimal_point: str = '.'
    thousands_sep: str = ''
    grouping: Tuple[int, ...] = ()

    @classmethod
    def classic(cls) -> 'NumericLocale':
        return cls()

    @classmethod
    def from_name(cls, name: str) -> 'NumericLocale':
        """Resolve the numeric conventions of a system locale.

        The process locale is restored before returning.
        """
        if name in ('', 'C', 'POSIX'):
            return cls(name=name or 'C')
        saved = _locale.setlocale(_locale.LC_NUMERIC)
        try:
            _locale.setlocale(_locale.LC_NUMERIC, name)
            conv = _locale.localeconv()
        except _locale.Error as exc:
            raise UnknownLocaleError(name, str(exc)) from exc
        finally:
            _locale.setlocale(_locale.LC_NUMERIC, saved)
        return cls(
            name=name,
            decimal_point=str(conv.get('decimal_point') or '.'),
            thousands_sep=str(conv.get('thousands_sep') or ''),
            grouping=tuple(conv.get('grouping') or ()),
        )

    @property
    def is_classic(self) -> bool:
        return self.decimal_point == '.' and not (self.thousands_sep and self.grouping)


@dataclass(frozen=True)
class OutputSettings:
    """Snapshot of the settings applied while rendering one format call."""
    flags: FmtFlags = field(default_factory=FmtFlags.default)
    precision: int = DEFAULT_PRECISION
    locale: NumericLocale = field(default_factory=NumericLocale.classic)

    def evolve(self, **changes: Any) -> 'OutputSettings':
        return replace(self, **changes)


@dataclass(frozen=True)
class PlaceholderOccurrence:
    """A placeholder found in a template.

    For escaped occurrences ``start`` points at the escape prefix, so the
    literal text before it is ``template[last:start]``.
    """
    start: int
    end: int
    escaped: bool = False


class Pair(NamedTuple):
    """Two related values, rendered as ``{first : second}``."""
    first: Any
    second: Any


class Verbatim:
    """Wrap a value so it is always rendered through its own conversion.

    Use it when a value would otherwise be taken for a pair or a sequence.
    """

    __slots__ = ('value',)

    def __init__(self, value: Any) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f'Verbatim({self.value!r})'


class ValueKind(enum.Enum):
    """Rendering rules, listed in matching priority order."""
    BOOLEAN = 'boolean'
    TEXT = 'text'
    PAIR = 'pair'
    CUSTOM = 'custom'
    SEQUENCE = 'sequence'
    UNKNOWN = 'unknown'
