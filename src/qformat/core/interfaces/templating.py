from __future__ import annotations
from typing import Any, Iterator, Protocol, Sequence, runtime_checkable

from qformat.core.models import OutputSettings, PlaceholderOccurrence


@runtime_checkable
class PlaceholderScannerProtocol(Protocol):
    """Finds placeholder occurrences in a template, left to right."""

    def scan(self, template: str) -> Iterator[PlaceholderOccurrence]:
        ...


@runtime_checkable
class TemplateEngineProtocol(Protocol):
    """Protocol for positional placeholder template engines."""

    def render(self, template: str, args: Sequence[Any], settings: OutputSettings) -> str:
        ...

    def substitute(self, template: str, rendered: Sequence[str]) -> str:
        """Bind already rendered arguments to the template placeholders."""
        ...
