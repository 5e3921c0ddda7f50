from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Substitution site inside a template. Tests import it as `qformat.PLACEHOLDER`.
PLACEHOLDER: str = '%?'

# A placeholder preceded by this character is emitted literally.
ESCAPE_PREFIX: str = '%'

# Emitted for missing arguments and for values no rendering rule accepts.
UNKNOWN_MARKER: str = '?'

DEFAULT_PRECISION: int = 6

ENV_PREFIX: str = 'QFORMAT_'
