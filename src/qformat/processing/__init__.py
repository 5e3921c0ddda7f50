"""Public API surface for qformat.processing."""
__all__ = [
    "placeholder_scanner",
]
