"""
template_engine – Concrete TemplateEngineProtocol implementation for qformat.

Every argument is rendered up front, then the template is scanned once and
the rendered texts are bound to placeholders in order. Missing arguments
render as "?" and surplus ones are dropped; neither case raises.
"""

import logging
from typing import Any, List, Optional, Sequence

from qformat.constants import UNKNOWN_MARKER
from qformat.core.interfaces.rendering import ValueRendererProtocol
from qformat.core.interfaces.templating import PlaceholderScannerProtocol, TemplateEngineProtocol
from qformat.core.models import OutputSettings
from qformat.logging.helpers import get_logger, is_trace_enabled, render_trace_context, trace_render
from qformat.processing.placeholder_scanner import PlaceholderScanner
from qformat.rendering.value_renderer import ValueRenderer


class PlaceholderTemplateEngine(TemplateEngineProtocol):
    """Positional ``%?`` template engine.

    Behaviour:
      • i-th non-escaped placeholder → i-th rendered argument, or "?"
      • %%?                          → literal "%?"
    """

    def __init__(
        self,
        *,
        renderer: Optional[ValueRendererProtocol] = None,
        scanner: Optional[PlaceholderScannerProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._log = logger or get_logger('templates')
        self._renderer = renderer or ValueRenderer()
        self._scanner = scanner or PlaceholderScanner()

    @property
    def renderer(self) -> ValueRendererProtocol:
        return self._renderer

    def render_args(self, args: Sequence[Any], settings: OutputSettings) -> List[str]:
        """Render every argument, in call order, with the same settings."""
        tracing = is_trace_enabled()
        rendered: List[str] = []
        for index, value in enumerate(args):
            text = self._renderer.render(value, settings)
            if tracing:
                ctx = render_trace_context(index, value, text, self._renderer.kind_of(value))
                trace_render(self._log, 'rendered argument', **ctx)
            rendered.append(text)
        return rendered

    def render(self, template: str, args: Sequence[Any], settings: OutputSettings) -> str:  # type: ignore[override]
        """Render *args* and substitute them into *template*."""
        if not isinstance(template, str):
            raise TypeError(f'template must be str, not {type(template).__name__}')
        return self.substitute(template, self.render_args(args, settings))

    def substitute(self, template: str, rendered: Sequence[str]) -> str:  # type: ignore[override]
        out: List[str] = []
        last = 0
        consumed = 0
        for occ in self._scanner.scan(template):
            out.append(template[last:occ.start])
            if occ.escaped:
                # Drop the escape prefix, keep the token text.
                out.append(template[occ.start + 1:occ.end])
            else:
                out.append(rendered[consumed] if consumed < len(rendered) else UNKNOWN_MARKER)
                consumed += 1
            last = occ.end
        out.append(template[last:])

        if consumed != len(rendered):
            self._log.debug(
                'argument count mismatch: %d placeholder(s), %d argument(s)', consumed, len(rendered)
            )
        return ''.join(out)
