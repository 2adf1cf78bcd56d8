"""
Log level enumeration

Totally ordered severity scale used for gating.
"""

from enum import IntEnum
from typing import Union


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Values are compatible with Python's logging module. ``OFF`` is never
    emitted itself; as a threshold it disables everything.
    """

    TRACE = 5       # Most verbose, detailed tracing
    DEBUG = 10      # Debug information
    INFO = 20       # Informational messages
    WARN = 30       # Warning messages
    ERROR = 40      # Error messages
    CRITICAL = 50   # Critical errors
    OFF = 100       # Logging disabled

    # Aliases using the long severity names
    INFORMATION = 20
    WARNING = 30
    NONE = 100

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name or alias (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        key = level_str.strip().upper()
        if key in cls.__members__:
            return cls.__members__[key]
        raise ValueError(f"Invalid log level: {level_str}")

    @classmethod
    def coerce(cls, value: Union["LogLevel", int, str]) -> "LogLevel":
        """
        Convert a level, its int value or its name to LogLevel.

        Raises:
            ValueError: If value does not name a level
        """
        if isinstance(value, str):
            return cls.from_string(value)
        return cls(value)

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        colors = {
            LogLevel.TRACE: "\033[90m",     # Gray
            LogLevel.DEBUG: "\033[32m",     # Green
            LogLevel.INFO: "\033[37m",      # White
            LogLevel.WARN: "\033[33m",      # Yellow
            LogLevel.ERROR: "\033[31m",     # Red
            LogLevel.CRITICAL: "\033[35m",  # Magenta
        }
        return colors.get(self, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"


# Levels a record can actually be emitted at (OFF is threshold-only)
EMITTABLE_LEVELS = (
    LogLevel.TRACE,
    LogLevel.DEBUG,
    LogLevel.INFO,
    LogLevel.WARN,
    LogLevel.ERROR,
    LogLevel.CRITICAL,
)
