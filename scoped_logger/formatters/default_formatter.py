"""
Default state/error formatter

Any callable taking ``(state, error)`` and returning text can be used as a
logger formatter; this is the one every logger starts with.
"""

from typing import Any, Callable

from scoped_logger.formatters.error_formatter import format_error
from scoped_logger.formatters.value_formatter import MISSING, format_value

Formatter = Callable[[Any, Any], str]


def format_default(state: Any = MISSING, error: Any = MISSING) -> str:
    """
    Format a state value and an error together.

    Args:
        state: State value (MISSING when absent)
        error: Error (MISSING or None when absent)

    Returns:
        State text, error text, or both joined with ``", "``

    Example:
        format_default("hi")                    # "hi"
        format_default(error=ValueError("x"))   # "[ValueError]: x"
        format_default("hi", ValueError("x"))   # "hi, [ValueError]: x"
    """
    if state is MISSING:
        return format_error(error)
    if error is MISSING or error is None:
        return format_value(state)

    parts = [format_value(state), format_error(error)]
    return ", ".join(part for part in parts if part)
