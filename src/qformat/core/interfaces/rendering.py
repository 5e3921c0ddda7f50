from __future__ import annotations
from typing import Any, Protocol, runtime_checkable

from qformat.core.models import OutputSettings, ValueKind


@runtime_checkable
class ValueRendererProtocol(Protocol):
    """Turns one argument into its textual form under given settings."""

    def kind_of(self, value: Any) -> ValueKind:
        """Return the rendering rule that *value* matches."""
        ...

    def render(self, value: Any, settings: OutputSettings) -> str:
        ...


@runtime_checkable
class NumberFormatterProtocol(Protocol):
    """Numeric text conversion backend used for native numbers."""

    def format_number(self, value: Any, settings: OutputSettings) -> str:
        ...


@runtime_checkable
class SettingsAwareProtocol(Protocol):
    """Values that render themselves and want to honour the active settings."""

    def __qformat__(self, settings: OutputSettings) -> str:
        ...
