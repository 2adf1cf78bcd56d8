"""Error formatter"""

import traceback
from typing import Any

from scoped_logger.formatters.value_formatter import MISSING, format_value


def format_traceback(error: BaseException) -> str:
    """Return the formatted traceback of a raised exception, or empty text."""
    if error.__traceback__ is None:
        return ""
    return "".join(traceback.format_tb(error.__traceback__)).rstrip()


def format_error(error: Any = MISSING) -> str:
    """
    Format an error as text.

    Exceptions render as ``[ExceptionType]: message Stack: <traceback>``,
    where the message part appears if there is a message or a traceback and
    the stack part only if the exception was raised. Values that are not
    exceptions are rendered by format_value.

    Args:
        error: Exception or other value (MISSING and None render as empty)

    Returns:
        Display text
    """
    if error is MISSING or error is None:
        return ""
    if not isinstance(error, BaseException):
        return format_value(error)

    text = f"[{type(error).__name__}]"
    message = str(error)
    trace = format_traceback(error)

    if message or trace:
        details = [message] if message else []
        if trace:
            details.append(f"Stack: {trace}")
        text += ": " + " ".join(details)

    return text
