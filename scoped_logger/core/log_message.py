"""
Log message data structure

The record a sink receives for one enabled emission.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict

from scoped_logger.core.log_level import LogLevel
from scoped_logger.formatters.event_formatter import format_event
from scoped_logger.formatters.value_formatter import MISSING, format_value


@dataclass
class LogMessage:
    """
    Log message data structure.

    Contains the raw arguments of an emit call together with the resolved
    prefix and formatted text. The core never stores these; a sink may.
    """

    level: LogLevel
    text: str
    prefix: str = ""
    event_id: Any = 0
    state: Any = MISSING
    error: Any = None
    source_name: str = ""
    timestamp: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        """Validate log message after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.text, str):
            self.text = str(self.text)

    @property
    def full_text(self) -> str:
        """Prefix and text as written by sinks."""
        return f"{self.prefix}{self.text}"

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log message to dictionary.

        Returns:
            Dictionary representation with state and error rendered as text
        """
        return {
            "level": self.level.name,
            "text": self.text,
            "prefix": self.prefix,
            "event_id": format_event(self.event_id),
            "state": format_value(self.state),
            "error": format_value(self.error) if self.error is not None else "",
            "source": self.source_name,
            "timestamp": self.timestamp.isoformat(),
        }

    def __str__(self) -> str:
        """String representation."""
        return self.full_text
