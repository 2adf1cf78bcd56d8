"""Console logger with ANSI colors"""

import sys
from dataclasses import dataclass, field
from typing import AbstractSet, Any, Optional, TextIO

from scoped_logger.core.base_logger import SinkLogger
from scoped_logger.core.log_level import LogLevel
from scoped_logger.core.log_message import LogMessage
from scoped_logger.core.logger_config import LoggerConfig


@dataclass
class ConsoleConf:
    """
    Which console stream each level goes to.

    A level in neither set is counted but not printed. If a level is in
    both sets, stdout wins.
    """

    stdout_levels: AbstractSet[LogLevel] = field(
        default_factory=lambda: frozenset(
            {LogLevel.TRACE, LogLevel.DEBUG, LogLevel.INFO, LogLevel.WARN}
        )
    )
    stderr_levels: AbstractSet[LogLevel] = field(
        default_factory=lambda: frozenset({LogLevel.ERROR, LogLevel.CRITICAL})
    )

    def __post_init__(self):
        """Validate configuration after initialization."""
        for name in ("stdout_levels", "stderr_levels"):
            levels = getattr(self, name)
            if not isinstance(levels, (set, frozenset)):
                raise TypeError(f"{name} must be a set of LogLevel")
            if not all(isinstance(level, LogLevel) for level in levels):
                raise TypeError(f"{name} must only contain LogLevel values")


class ConsoleLogger(SinkLogger):
    """Write logs to stdout/stderr with optional colors."""

    def __init__(
        self,
        source: Any,
        console_conf: Optional[ConsoleConf] = None,
        colored: bool = True,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        config: Optional[LoggerConfig] = None,
    ):
        """
        Initialize console logger.

        Args:
            source: Source identity
            console_conf: Level to stream mapping (default: ConsoleConf())
            colored: Use ANSI color codes
            stdout: Output stream (default: sys.stdout at write time)
            stderr: Error stream (default: sys.stderr at write time)
            config: Logger configuration
        """
        super().__init__(source, config)
        self.console_conf = console_conf or ConsoleConf()
        self.colored = colored
        self._stdout = stdout
        self._stderr = stderr

    def stream_for_level(self, level: LogLevel) -> Optional[TextIO]:
        """
        Get the stream a level is printed to.

        Args:
            level: Message level

        Returns:
            The stream, or None if the level is not printed
        """
        if level in self.console_conf.stdout_levels:
            return self._stdout or sys.stdout
        if level in self.console_conf.stderr_levels:
            return self._stderr or sys.stderr
        return None

    def write(self, message: LogMessage) -> None:
        """Write log message to console."""
        stream = self.stream_for_level(message.level)
        if stream is None:
            return

        line = str(message)
        if self.colored:
            line = f"{message.level.color_code}{line}{message.level.reset_code}"

        stream.write(line + "\n")
        stream.flush()
