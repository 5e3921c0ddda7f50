"""
value_renderer – Per-argument text conversion with capability dispatch.

A value is classified by the first rule it satisfies, in this order:

  • boolean   → "true" / "false"
  • text      → str/bytes verbatim, numbers via the numeric backend
  • pair      → "{first : second}" for 2-tuples (named tuples, dict items)
  • custom    → the type's own conversion (``__qformat__`` or ``str()``)
  • sequence  → "[a, b, c]" for any other iterable, mappings via items()
  • unknown   → "?"

Composite values are rendered recursively with the same rules.
"""

import logging
import numbers
from collections.abc import Iterable, Mapping
from typing import Any, Callable, Dict, Optional, Tuple

from qformat.constants import UNKNOWN_MARKER
from qformat.core.interfaces.rendering import NumberFormatterProtocol, ValueRendererProtocol
from qformat.core.models import OutputSettings, ValueKind, Verbatim
from qformat.logging.helpers import get_logger
from qformat.rendering.numeric import NumberFormatter

_TEXT_TYPES = (str, bytes, bytearray)


def _is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def _is_text(value: Any) -> bool:
    return isinstance(value, _TEXT_TYPES) or isinstance(value, numbers.Number)


def _is_pair(value: Any) -> bool:
    return isinstance(value, tuple) and len(value) == 2


def _is_custom(value: Any) -> bool:
    cls = type(value)
    if getattr(cls, '__qformat__', None) is not None:
        return True
    return cls.__str__ is not object.__str__ or cls.__format__ is not object.__format__


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Iterable)


class ValueRenderer(ValueRendererProtocol):
    """Default ValueRendererProtocol implementation.

    The matcher table is fixed; its order is the priority between rules for
    values that satisfy several of them (a ``str`` is also iterable, a
    2-tuple is also a sequence).
    """

    _MATCHERS: Tuple[Tuple[ValueKind, Callable[[Any], bool]], ...] = (
        (ValueKind.BOOLEAN, _is_boolean),
        (ValueKind.TEXT, _is_text),
        (ValueKind.PAIR, _is_pair),
        (ValueKind.CUSTOM, _is_custom),
        (ValueKind.SEQUENCE, _is_sequence),
    )

    def __init__(
        self,
        *,
        number_formatter: Optional[NumberFormatterProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._numbers = number_formatter or NumberFormatter()
        self._log = logger or get_logger('render')
        self._handlers: Dict[ValueKind, Callable[[Any, OutputSettings], str]] = {
            ValueKind.BOOLEAN: self._render_boolean,
            ValueKind.TEXT: self._render_text,
            ValueKind.PAIR: self._render_pair,
            ValueKind.CUSTOM: self._render_custom,
            ValueKind.SEQUENCE: self._render_sequence,
            ValueKind.UNKNOWN: self._render_unknown,
        }

    def kind_of(self, value: Any) -> ValueKind:
        if isinstance(value, Verbatim):
            return ValueKind.CUSTOM
        for kind, matches in self._MATCHERS:
            if matches(value):
                return kind
        return ValueKind.UNKNOWN

    def render(self, value: Any, settings: OutputSettings) -> str:
        """Render *value* to text using the first matching rule."""
        if isinstance(value, Verbatim):
            return self._render_custom(value.value, settings)
        return self._handlers[self.kind_of(value)](value, settings)

    # ------------------------------------------------------------------ #
    #  Rules                                                             #
    # ------------------------------------------------------------------ #
    @staticmethod
    def _render_boolean(value: bool, settings: OutputSettings) -> str:
        return 'true' if value else 'false'

    def _render_text(self, value: Any, settings: OutputSettings) -> str:
        if isinstance(value, str):
            return value
        if isinstance(value, (bytes, bytearray)):
            return bytes(value).decode('utf-8', errors='replace')
        return self._numbers.format_number(value, settings)

    def _render_pair(self, value: tuple, settings: OutputSettings) -> str:
        first, second = value
        return f'{{{self.render(first, settings)} : {self.render(second, settings)}}}'

    def _render_custom(self, value: Any, settings: OutputSettings) -> str:
        hook = getattr(type(value), '__qformat__', None)
        try:
            if hook is not None:
                return str(hook(value, settings))
            if isinstance(value, numbers.Number) and not isinstance(value, bool):
                # Wrapped numbers still honour precision, radix and locale.
                return self._numbers.format_number(value, settings)
            return str(value)
        except Exception as exc:  # noqa: BLE001
            # A broken conversion must not abort the whole format call.
            self._log.warning('⚠  conversion of %s failed: %s', type(value).__name__, exc)
            return UNKNOWN_MARKER

    def _render_sequence(self, value: Iterable, settings: OutputSettings) -> str:
        items = value.items() if isinstance(value, Mapping) else value
        return '[' + ', '.join(self.render(item, settings) for item in items) + ']'

    def _render_unknown(self, value: Any, settings: OutputSettings) -> str:
        self._log.debug('no rendering rule for %s; using %r', type(value).__name__, UNKNOWN_MARKER)
        return UNKNOWN_MARKER
