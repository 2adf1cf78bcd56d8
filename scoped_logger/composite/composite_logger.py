"""
Composite logger base

Forwards every emit call, unmodified, to two emitters in a fixed order.
"""

from typing import Any, Optional, Tuple

from scoped_logger.core.base_logger import BaseLogger, Emitter
from scoped_logger.core.hooks import HookKind
from scoped_logger.core.log_level import LogLevel
from scoped_logger.core.logger_config import LoggerConfig
from scoped_logger.formatters.default_formatter import Formatter
from scoped_logger.formatters.event_formatter import EventLike
from scoped_logger.formatters.value_formatter import MISSING


class CompositeLogger(BaseLogger):
    """
    Logger that forwards to two other loggers.

    Failures are not isolated: if the first emitter raises, the exception
    propagates and the second emitter is not called.
    """

    def __init__(
        self,
        source: Any,
        first: Emitter,
        second: Emitter,
        config: Optional[LoggerConfig] = None,
    ):
        super().__init__(source, config)
        self._first = first
        self._second = second

    @property
    def emitters(self) -> Tuple[Emitter, Emitter]:
        return (self._first, self._second)

    def is_enabled(self, level: LogLevel) -> bool:
        """True if either wrapped logger would emit at this level."""
        return self._first.is_enabled(level) or self._second.is_enabled(level)

    def _prepare(self) -> None:
        """Called at the start of every emit, before any hook."""

    def emit(
        self,
        level: LogLevel = LogLevel.INFO,
        event_id: EventLike = 0,
        state: Any = MISSING,
        error: Any = None,
        formatter: Optional[Formatter] = None,
    ) -> "CompositeLogger":
        """
        Forward the call to both loggers, first then second.

        Counts the call and publishes MESSAGE_EMITTED (carrying the
        forwarded arguments) when either logger is enabled for the level.
        """
        self._prepare()
        params = (level, event_id, state, error, formatter)
        self._publish(HookKind.BEFORE_EMIT, params=params, level=level)
        try:
            level = LogLevel.coerce(level)
            self._first.emit(*params)
            self._second.emit(*params)
            if self.is_enabled(level):
                self._num_messages_logged += 1
                self._publish(HookKind.MESSAGE_EMITTED, params=params, level=level)
            return self
        finally:
            self._publish(HookKind.AFTER_EMIT, level=level)

    def __repr__(self) -> str:
        """String representation."""
        return f"{type(self).__name__}<{self._first!r}, {self._second!r}>"
