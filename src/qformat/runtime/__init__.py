"""Runtime configuration for qformat (env-driven defaults)."""
from .config import FormatterConfig

__all__ = ["FormatterConfig"]
