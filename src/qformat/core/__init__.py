from __future__ import annotations

"""Public surface for qformat.core.

Stable import location for the data model and the protocol types:

    from qformat.core import OutputSettings, FmtFlags, ValueRendererProtocol
"""

from qformat.core.models import (
    FmtFlags,
    NumericLocale,
    OutputSettings,
    Pair,
    PlaceholderOccurrence,
    ValueKind,
    Verbatim,
)
from qformat.core.interfaces import (
    NumberFormatterProtocol,
    PlaceholderScannerProtocol,
    SettingsAwareProtocol,
    TemplateEngineProtocol,
    ValueRendererProtocol,
)

__all__ = [
    # Models
    "FmtFlags",
    "NumericLocale",
    "OutputSettings",
    "Pair",
    "PlaceholderOccurrence",
    "ValueKind",
    "Verbatim",
    # Protocols
    "NumberFormatterProtocol",
    "PlaceholderScannerProtocol",
    "SettingsAwareProtocol",
    "TemplateEngineProtocol",
    "ValueRendererProtocol",
]
