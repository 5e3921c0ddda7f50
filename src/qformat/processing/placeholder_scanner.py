"""
placeholder_scanner – Locate ``%?`` substitution sites in a template.

Scanning rules:

  • %?    → substitution site
  • %%?   → escaped; rendered as the literal "%?" and consumes no argument
  • any other text, including a lone "%", is literal

The scan is a single left-to-right pass; after a match it resumes right
after the token, so "%?%?" yields two sites.
"""

from typing import Iterator

from qformat.constants import ESCAPE_PREFIX, PLACEHOLDER
from qformat.core.interfaces.templating import PlaceholderScannerProtocol
from qformat.core.models import PlaceholderOccurrence


class PlaceholderScanner(PlaceholderScannerProtocol):
    """Streaming scanner for a fixed placeholder token with a one-char escape."""

    def __init__(self, *, token: str = PLACEHOLDER, escape: str = ESCAPE_PREFIX) -> None:
        if not token:
            raise ValueError('placeholder token must be a non-empty string')
        if not isinstance(escape, str) or len(escape) != 1:
            raise ValueError('escape must be a single character string')
        self.token = token
        self.escape = escape

    def scan(self, template: str) -> Iterator[PlaceholderOccurrence]:
        """Yield every placeholder occurrence of *template*, in order."""
        size = len(self.token)
        pos = template.find(self.token)
        while pos != -1:
            end = pos + size
            if pos > 0 and template[pos - 1] == self.escape:
                yield PlaceholderOccurrence(start=pos - 1, end=end, escaped=True)
            else:
                yield PlaceholderOccurrence(start=pos, end=end)
            pos = template.find(self.token, end)

    def count(self, template: str) -> int:
        """Number of non-escaped occurrences, i.e. the arguments *template* consumes."""
        return sum(1 for occ in self.scan(template) if not occ.escaped)
