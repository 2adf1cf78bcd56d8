"""Logger builder pattern"""

from typing import Any, List, Optional, TextIO

from scoped_logger.composite.dual_logger import DualLogger
from scoped_logger.composite.wrapped_logger import WrappedLogger
from scoped_logger.core.base_logger import BaseLogger, Emitter
from scoped_logger.core.log_level import LogLevel
from scoped_logger.core.logger_config import LoggerConfig
from scoped_logger.core.scope import ScopeRegistry
from scoped_logger.formatters.default_formatter import Formatter
from scoped_logger.loggers.console_logger import ConsoleLogger
from scoped_logger.loggers.dev_null_logger import DevNullLogger
from scoped_logger.loggers.memory_logger import MemoryLogger
from scoped_logger.loggers.stream_logger import StreamLogger


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._source: Any = "logger"
        self._config = LoggerConfig()
        self._console_enabled = False
        self._console_colored = True
        self._streams: List[TextIO] = []
        self._memory_capacity: Optional[int] = None
        self._custom_loggers: List[Emitter] = []
        self._secondary: Optional[Emitter] = None

    def with_source(self, source: Any) -> "LoggerBuilder":
        """Set the source identity (string, class or function)."""
        self._source = source
        return self

    def with_level(self, level: LogLevel) -> "LoggerBuilder":
        """Set minimum log level."""
        self._config.level = level
        return self

    def with_display(
        self,
        time: Optional[bool] = None,
        date: Optional[bool] = None,
        type_: Optional[bool] = None,
        scope: Optional[bool] = None,
    ) -> "LoggerBuilder":
        """
        Choose which labels go into the message prefix.

        Args:
            time: Include current time
            date: Include current date
            type_: Include the source name
            scope: Include open scopes

        Returns:
            Self for method chaining

        Example:
            logger = (LoggerBuilder()
                .with_console()
                .with_display(date=False, scope=False)
                .build())
        """
        if time is not None:
            self._config.log_time = bool(time)
        if date is not None:
            self._config.log_date = bool(date)
        if type_ is not None:
            self._config.log_type = bool(type_)
        if scope is not None:
            self._config.log_scope = bool(scope)
        return self

    def with_formatter(self, formatter: Formatter) -> "LoggerBuilder":
        """Set the (state, error) -> str formatter."""
        if not callable(formatter):
            raise TypeError("formatter must be callable")
        self._config.formatter = formatter
        return self

    def with_isolated_scopes(self, enabled: bool = True) -> "LoggerBuilder":
        """
        Give the built loggers one private scope stack.

        By default loggers for the same source share one scope stack
        process-wide.
        """
        self._config.isolated_scopes = enabled
        return self

    def with_config(self, config: LoggerConfig) -> "LoggerBuilder":
        """Replace the whole configuration."""
        self._config = config.copy()
        return self

    def with_console(self, colored: bool = True) -> "LoggerBuilder":
        """Enable console output."""
        self._console_enabled = True
        self._console_colored = colored
        return self

    def with_stream(self, stream: TextIO) -> "LoggerBuilder":
        """Enable output of every level to a text stream."""
        self._streams.append(stream)
        return self

    def with_memory(self, capacity: int = 1000) -> "LoggerBuilder":
        """Keep the most recent messages in memory."""
        self._memory_capacity = capacity
        return self

    def add_logger(self, logger: Emitter) -> "LoggerBuilder":
        """
        Add a custom logger.

        Args:
            logger: Logger instance, used as-is

        Returns:
            Self for method chaining
        """
        self._custom_loggers.append(logger)
        return self

    def wrapping(self, secondary: Emitter) -> "LoggerBuilder":
        """
        Wrap the built logger so every message is copied to secondary.

        The result of build() is then a WrappedLogger whose settings and
        scopes are mirrored into secondary.

        Example:
            audit = MemoryLogger("audit")
            logger = (LoggerBuilder()
                .with_source(OrderService)
                .with_console()
                .wrapping(audit)
                .build())
        """
        self._secondary = secondary
        return self

    def _build_sinks(self) -> List[Emitter]:
        sinks: List[Emitter] = []

        if self._console_enabled:
            sinks.append(ConsoleLogger(
                self._source,
                colored=self._console_colored,
                config=self._config.copy(),
            ))

        for stream in self._streams:
            sinks.append(StreamLogger.from_one_stream(
                self._source, stream, config=self._config.copy()
            ))

        if self._memory_capacity is not None:
            sinks.append(MemoryLogger(
                self._source,
                capacity=self._memory_capacity,
                config=self._config.copy(),
            ))

        sinks.extend(self._custom_loggers)
        return sinks

    def build(self) -> BaseLogger:
        """
        Build and return configured logger.

        No outputs gives a DevNullLogger, one output gives that logger,
        more outputs are chained with DualLoggers in the order added.
        With isolated scopes, every logger built here shares one private
        scope registry; custom loggers keep their own.
        """
        sinks = self._build_sinks()
        built: List[BaseLogger] = [s for s in sinks if s not in self._custom_loggers]

        if not sinks:
            logger = DevNullLogger(self._source, self._config.copy())
            built.append(logger)
        else:
            logger = sinks[0]
            for sink in sinks[1:]:
                logger = DualLogger(self._source, logger, sink, self._config.copy())
                built.append(logger)

        if self._config.isolated_scopes:
            registry = ScopeRegistry()
            for item in built:
                item.scope_registry = registry

        if self._secondary is not None:
            logger = WrappedLogger(logger, self._secondary)

        return logger
