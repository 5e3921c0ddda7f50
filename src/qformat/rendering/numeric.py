"""
numeric – Text conversion of native numbers under OutputSettings.

Rules follow the usual stream conventions:

  • integers honour the radix (dec/oct/hex), showbase, showpos, uppercase
  • floats use %g by default, fixed/scientific/hexfloat per floatfield,
    showpoint keeps trailing zeros in general mode
  • the locale decimal point and digit grouping apply to decimal output

Precision defaults to 6 and a negative precision behaves as the default.
"""

import decimal
import locale as _locale
import math
import numbers
import re
from typing import Any, Sequence

from qformat.constants import DEFAULT_PRECISION
from qformat.core.interfaces.rendering import NumberFormatterProtocol
from qformat.core.models import FmtFlags, NumericLocale, OutputSettings

_LEADING_DIGITS_RX = re.compile(r'([+-]?)(\d+)(.*)', re.S)


def _is_infinite(value: Any) -> bool:
    if isinstance(value, decimal.Decimal):
        return value.is_infinite()
    return isinstance(value, float) and math.isinf(value)


def group_digits(digits: str, sep: str, grouping: Sequence[int]) -> str:
    """Insert *sep* between digit groups of *digits* (no sign) per *grouping*."""
    if not sep or not grouping:
        return digits
    groups: list[str] = []
    end = len(digits)
    size = 0
    sizes = iter(grouping)
    while end > 0:
        nxt = next(sizes, 0)
        if nxt == _locale.CHAR_MAX:
            break
        if nxt > 0:
            size = nxt
        if size <= 0:
            break
        if end <= size:
            break
        groups.append(digits[end - size:end])
        end -= size
    groups.append(digits[:end])
    return sep.join(reversed(groups))


class NumberFormatter(NumberFormatterProtocol):
    """Default numeric backend used by the value renderer."""

    def format_number(self, value: Any, settings: OutputSettings) -> str:
        if isinstance(value, numbers.Integral):
            return self.format_integer(int(value), settings)
        if isinstance(value, (numbers.Real, decimal.Decimal)):
            try:
                as_float = float(value)
            except (OverflowError, ValueError):
                # Huge fractions and signalling NaNs have no float value.
                return self.format_decimal(value, settings)
            if math.isinf(as_float) and not _is_infinite(value):
                return self.format_decimal(value, settings)
            return self.format_float(as_float, settings)
        if isinstance(value, numbers.Complex):
            c = complex(value)
            return f'({self.format_float(c.real, settings)},{self.format_float(c.imag, settings)})'
        return str(value)

    def format_integer(self, value: int, settings: OutputSettings) -> str:
        flags = settings.flags
        base = flags & FmtFlags.BASEFIELD
        upper = bool(flags & FmtFlags.UPPERCASE)
        magnitude = abs(value)
        prefix = ''

        if base == FmtFlags.OCT:
            digits = format(magnitude, 'o')
            if flags & FmtFlags.SHOWBASE and magnitude:
                prefix = '0'
        elif base == FmtFlags.HEX:
            digits = format(magnitude, 'X' if upper else 'x')
            if flags & FmtFlags.SHOWBASE and magnitude:
                prefix = '0X' if upper else '0x'
        else:
            loc = settings.locale
            digits = group_digits(str(magnitude), loc.thousands_sep, loc.grouping)

        if value < 0:
            sign = '-'
        elif flags & FmtFlags.SHOWPOS and base not in (FmtFlags.OCT, FmtFlags.HEX):
            sign = '+'
        else:
            sign = ''
        return f'{sign}{prefix}{digits}'

    def format_float(self, value: float, settings: OutputSettings) -> str:
        flags = settings.flags
        upper = bool(flags & FmtFlags.UPPERCASE)
        field = flags & FmtFlags.FLOATFIELD

        if field == FmtFlags.FLOATFIELD:
            text = self._hexfloat(value, flags)
            return text.upper() if upper else text

        precision = settings.precision if settings.precision >= 0 else DEFAULT_PRECISION
        if field == FmtFlags.FIXED:
            kind = 'f'
        elif field == FmtFlags.SCIENTIFIC:
            kind = 'e'
        else:
            kind = 'g'
        if upper:
            kind = kind.upper()
        sign = '+' if flags & FmtFlags.SHOWPOS else ''
        alt = '#' if flags & FmtFlags.SHOWPOINT else ''
        text = format(value, f'{sign}{alt}.{precision}{kind}')
        return self._localize(text, settings.locale)

    def format_decimal(self, value: Any, settings: OutputSettings) -> str:
        """Format reals that do not fit a float (huge fractions, decimals, sNaN)."""
        if isinstance(value, decimal.Decimal):
            dec = value
        elif isinstance(value, numbers.Rational):
            dec = decimal.Decimal(value.numerator) / decimal.Decimal(value.denominator)
        else:
            return str(value)
        flags = settings.flags
        field = flags & FmtFlags.FLOATFIELD
        if not dec.is_finite() or field == FmtFlags.FLOATFIELD:
            return str(dec)

        precision = settings.precision if settings.precision >= 0 else DEFAULT_PRECISION
        if field == FmtFlags.FIXED:
            kind = 'f'
        elif field == FmtFlags.SCIENTIFIC:
            kind = 'e'
        else:
            kind = 'g'
            dec = dec.normalize()
        if flags & FmtFlags.UPPERCASE:
            kind = kind.upper()
        sign = '+' if flags & FmtFlags.SHOWPOS else ''
        text = format(dec, f'{sign}.{precision}{kind}')
        return self._localize(text, settings.locale)

    @staticmethod
    def _hexfloat(value: float, flags: FmtFlags) -> str:
        if math.isnan(value) or math.isinf(value):
            text = repr(value)
        else:
            mantissa, _, exponent = float.hex(value).partition('p')
            if '.' in mantissa:
                mantissa = mantissa.rstrip('0').rstrip('.')
            text = f'{mantissa}p{exponent}'
        if flags & FmtFlags.SHOWPOS and not text.startswith('-'):
            text = '+' + text
        return text

    @staticmethod
    def _localize(text: str, loc: NumericLocale) -> str:
        if loc.is_classic:
            return text
        m = _LEADING_DIGITS_RX.fullmatch(text)
        if not m:
            return text
        sign, int_digits, rest = m.groups()
        int_digits = group_digits(int_digits, loc.thousands_sep, loc.grouping)
        if rest.startswith('.'):
            rest = loc.decimal_point + rest[1:]
        return f'{sign}{int_digits}{rest}'
