"""
Logger configuration management
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict

from scoped_logger.core.log_level import LogLevel
from scoped_logger.formatters.default_formatter import Formatter, format_default


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    Holds everything a logger can be configured with at construction; the
    same values stay settable on the logger afterwards.
    """

    # Gating
    level: LogLevel = LogLevel.INFO

    # Prefix display flags
    log_time: bool = True
    log_date: bool = True
    log_type: bool = True
    log_scope: bool = True

    # Formatting
    formatter: Formatter = field(default=format_default)

    # Scope stacks: shared process-wide registry unless isolated
    isolated_scopes: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.level, (str, int)):
            self.level = LogLevel.coerce(self.level)
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if self.formatter is None:
            self.formatter = format_default
        if not callable(self.formatter):
            raise TypeError("formatter must be callable")

        self.log_time = bool(self.log_time)
        self.log_date = bool(self.log_date)
        self.log_type = bool(self.log_type)
        self.log_scope = bool(self.log_scope)

    def copy(self, **changes: Any) -> "LoggerConfig":
        """
        Create a copy with some fields changed.

        Args:
            changes: Field values to override

        Returns:
            New LoggerConfig instance
        """
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert configuration to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "level": self.level.name,
            "log_time": self.log_time,
            "log_date": self.log_date,
            "log_type": self.log_type,
            "log_scope": self.log_scope,
            "formatter": getattr(self.formatter, "__name__", repr(self.formatter)),
            "isolated_scopes": self.isolated_scopes,
        }

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(level=LogLevel.TRACE)

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            level=LogLevel.WARN,
            log_scope=False,
        )

    @classmethod
    def quiet_config(cls) -> "LoggerConfig":
        """Create configuration that gates out everything."""
        return cls(level=LogLevel.OFF)
