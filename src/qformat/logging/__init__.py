"""Logging helpers for qformat (namespaced loggers, JSON formatter, render tracing)."""
from .factory import DefaultLoggerFactory
from .helpers import (
    JsonLogFormatter,
    get_logger,
    parse_level,
    render_trace_context,
    setup_base_logger,
    trace_render,
)

__all__ = [
    "DefaultLoggerFactory",
    "JsonLogFormatter",
    "get_logger",
    "parse_level",
    "render_trace_context",
    "setup_base_logger",
    "trace_render",
]
