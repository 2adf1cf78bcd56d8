"""
Formatters module

Pure functions turning state values, errors and event ids into text.
"""

from scoped_logger.formatters.value_formatter import (
    MISSING,
    ValueKind,
    classify,
    format_value,
    inspect_value,
)
from scoped_logger.formatters.error_formatter import format_error
from scoped_logger.formatters.event_formatter import EventId, format_event
from scoped_logger.formatters.default_formatter import Formatter, format_default

__all__ = [
    "MISSING",
    "ValueKind",
    "classify",
    "format_value",
    "inspect_value",
    "format_error",
    "EventId",
    "format_event",
    "Formatter",
    "format_default",
]
