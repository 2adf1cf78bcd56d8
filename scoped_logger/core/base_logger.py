"""
Base logger classes

BaseLogger carries everything the logger variants share: the source
identity, gating, display flags, the formatter, the scope stack, the hook
bus and the message counter. It declares ``emit`` but does not implement
it. SinkLogger implements the emission sequence once for every concrete
sink, which only has to provide ``write``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from datetime import datetime
from typing import (
    Any,
    Awaitable,
    Callable,
    Hashable,
    Iterator,
    Optional,
    Protocol,
    TypeVar,
    Union,
)

from scoped_logger.core.hooks import HookBus, HookEvent, HookKind
from scoped_logger.core.log_level import LogLevel
from scoped_logger.core.log_message import LogMessage
from scoped_logger.core.logger_config import LoggerConfig
from scoped_logger.core.scope import Scope, ScopeRegistry, source_name
from scoped_logger.formatters.default_formatter import Formatter, format_default
from scoped_logger.formatters.event_formatter import EventLike, format_event, is_no_event
from scoped_logger.formatters.value_formatter import MISSING

T = TypeVar("T")


class Emitter(Protocol):
    """
    What composite loggers need from the loggers they hold.

    Every BaseLogger satisfies this.
    """

    source: Hashable
    level: LogLevel
    log_time: bool
    log_date: bool
    log_type: bool
    log_scope: bool
    formatter: Formatter
    scope_registry: ScopeRegistry

    def emit(
        self,
        level: LogLevel = LogLevel.INFO,
        event_id: EventLike = 0,
        state: Any = MISSING,
        error: Any = None,
        formatter: Optional[Formatter] = None,
    ) -> Any:
        ...

    def is_enabled(self, level: LogLevel) -> bool:
        ...


class BaseLogger:
    """
    Common logger functionality.

    A logger is created for a source identity: a class, a function or a
    context-identifying string. Loggers sharing a source (and a scope
    registry) share one scope stack.

    Example:
        logger = MemoryLogger(MyService)
        with logger.scope("request 42"):
            logger.info("handling")   # "... [MyService] [request 42]: handling"
    """

    def __init__(self, source: Any, config: Optional[LoggerConfig] = None):
        """
        Initialize logger.

        Args:
            source: Source identity (string, class or function)
            config: Logger configuration (default: LoggerConfig.default())

        Raises:
            TypeError: If the source cannot be named as text
        """
        self._source_name = source_name(source)
        self._source = source

        config = config or LoggerConfig.default()
        self._level = config.level
        self._log_time = config.log_time
        self._log_date = config.log_date
        self._log_type = config.log_type
        self._log_scope = config.log_scope
        self._formatter: Formatter = config.formatter

        if config.isolated_scopes:
            self._scope_registry = ScopeRegistry()
        else:
            self._scope_registry = ScopeRegistry.default()

        self._hooks = HookBus()
        self._num_messages_logged = 0

    # -- properties -------------------------------------------------------

    @property
    def source(self) -> Any:
        """The source identity this logger logs for."""
        return self._source

    @source.setter
    def source(self, value: Any) -> None:
        self._source_name = source_name(value)
        self._source = value

    @property
    def source_name(self) -> str:
        return self._source_name

    @property
    def level(self) -> LogLevel:
        """Minimum level that is emitted."""
        return self._level

    @level.setter
    def level(self, value: Union[LogLevel, int, str]) -> None:
        self._level = LogLevel.coerce(value)

    @property
    def log_time(self) -> bool:
        return self._log_time

    @log_time.setter
    def log_time(self, value: bool) -> None:
        self._log_time = bool(value)

    @property
    def log_date(self) -> bool:
        return self._log_date

    @log_date.setter
    def log_date(self, value: bool) -> None:
        self._log_date = bool(value)

    @property
    def log_type(self) -> bool:
        return self._log_type

    @log_type.setter
    def log_type(self, value: bool) -> None:
        self._log_type = bool(value)

    @property
    def log_scope(self) -> bool:
        return self._log_scope

    @log_scope.setter
    def log_scope(self, value: bool) -> None:
        self._log_scope = bool(value)

    @property
    def formatter(self) -> Formatter:
        """Formatter used when an emit call does not override it."""
        return self._formatter

    @formatter.setter
    def formatter(self, value: Optional[Formatter]) -> None:
        if value is None:
            value = format_default
        if not callable(value):
            raise TypeError("formatter must be callable")
        self._formatter = value

    @property
    def scope_registry(self) -> ScopeRegistry:
        """Registry holding this logger's scope stack."""
        return self._scope_registry

    @scope_registry.setter
    def scope_registry(self, value: ScopeRegistry) -> None:
        if not isinstance(value, ScopeRegistry):
            raise TypeError("scope_registry must be a ScopeRegistry")
        self._scope_registry = value

    @property
    def hooks(self) -> HookBus:
        """Lifecycle notification channel."""
        return self._hooks

    @property
    def num_messages_logged(self) -> int:
        """Number of enabled emissions so far."""
        return self._num_messages_logged

    # -- labels -----------------------------------------------------------

    @property
    def time_string(self) -> str:
        """Current time as HH:MM:SS."""
        return datetime.now().strftime("%H:%M:%S")

    @property
    def date_string(self) -> str:
        """Current date as YYYY-MM-DD."""
        return datetime.now().strftime("%Y-%m-%d")

    @property
    def type_string(self) -> str:
        return f"[{self._source_name}]"

    @property
    def scope_string(self) -> str:
        """Open scopes of this logger's source, outermost first."""
        return "".join(f"[{scope}]" for scope in self._scope_registry.stack(self._source))

    def build_prefix(self, event_id: Any = 0, now: Optional[datetime] = None) -> str:
        """
        Build the label prefix for a message.

        Segments are date, time, type, scope and event, in that order. A
        segment is left out if its flag is off or its text is empty.

        Args:
            event_id: Event id of the message (0 means no event)
            now: Timestamp to render (default: current time)

        Returns:
            Space-joined segments followed by ``": "``, or empty text
        """
        now = now or datetime.now()
        segments = [
            now.strftime("%Y-%m-%d") if self._log_date else "",
            now.strftime("%H:%M:%S") if self._log_time else "",
            self.type_string if self._log_type else "",
            self.scope_string if self._log_scope else "",
            "" if is_no_event(event_id) else f"[E:{format_event(event_id)}]",
        ]
        prefix = " ".join(s for s in segments if s)
        return f"{prefix}: " if prefix else ""

    # -- gating -----------------------------------------------------------

    def is_enabled(self, level: LogLevel) -> bool:
        """
        Check whether messages of a level pass the threshold.

        Args:
            level: Level to check

        Returns:
            True if level >= threshold
        """
        return level >= self._level

    # -- scopes -----------------------------------------------------------

    def begin_scope(self, value: Any = MISSING) -> Scope:
        """
        Push a new scope onto this source's stack.

        Args:
            value: Any value; rendered into the scope label

        Returns:
            The new scope, to be passed to end_scope
        """
        scope = Scope(value, self)
        self._scope_registry.push(self._source, scope)
        self._publish(HookKind.SCOPE_BEGIN, scope=scope)
        return scope

    def end_scope(self, scope: Scope) -> "BaseLogger":
        """
        Pop a scope off this source's stack.

        Args:
            scope: The topmost scope

        Returns:
            Self for method chaining

        Raises:
            ScopeNotKnownError: If this source has no scope stack
            ScopeNotOnTopError: If scope is not the topmost scope
        """
        self._scope_registry.pop(self._source, scope)
        self._publish(HookKind.SCOPE_END, scope=scope)
        return self

    @contextmanager
    def scope(self, value: Any = MISSING) -> Iterator[Scope]:
        """
        Context manager that begins a scope and always ends it.

        Example:
            with logger.scope("import"):
                logger.info("started")
        """
        scope = self.begin_scope(value)
        try:
            yield scope
        finally:
            self.end_scope(scope)

    def with_scope(self, value: Any, body: Callable[[Scope, "BaseLogger"], T]) -> T:
        """
        Run body inside a scope.

        Args:
            value: Scope value
            body: Called as body(scope, logger)

        Returns:
            Whatever body returns
        """
        with self.scope(value) as scope:
            return body(scope, self)

    async def with_scope_async(
        self,
        value: Any,
        body: Callable[[Scope, "BaseLogger"], Awaitable[T]],
    ) -> T:
        """
        Await body inside a scope.

        The scope stays on the stack while body is suspended. Other tasks
        logging for the same source must close their scopes in LIFO order.

        Args:
            value: Scope value
            body: Coroutine function called as body(scope, logger)

        Returns:
            Whatever body returns
        """
        scope = self.begin_scope(value)
        try:
            return await body(scope, self)
        finally:
            self.end_scope(scope)

    # -- emission ---------------------------------------------------------

    def emit(
        self,
        level: LogLevel = LogLevel.INFO,
        event_id: EventLike = 0,
        state: Any = MISSING,
        error: Any = None,
        formatter: Optional[Formatter] = None,
    ) -> "BaseLogger":
        """
        Log a state value and/or an error.

        Args:
            level: Severity of the message
            event_id: int or EventId (0 means no event)
            state: State value (MISSING when absent)
            error: Error (None when absent)
            formatter: Formatter for this call only

        Returns:
            Self for method chaining

        Raises:
            NotImplementedError: Always, on the base class
        """
        raise NotImplementedError("abstract method")

    def _log(self, level: LogLevel, message: Any = MISSING, *args: Any) -> "BaseLogger":
        if not args:
            return self.emit(level, 0, message)
        if len(args) == 1 and isinstance(args[0], BaseException):
            return self.emit(level, 0, message, args[0])
        return self.emit(level, 0, [message, *args])

    def trace(self, message: Any = MISSING, *args: Any) -> "BaseLogger":
        """Log trace message."""
        return self._log(LogLevel.TRACE, message, *args)

    def debug(self, message: Any = MISSING, *args: Any) -> "BaseLogger":
        """Log debug message."""
        return self._log(LogLevel.DEBUG, message, *args)

    def info(self, message: Any = MISSING, *args: Any) -> "BaseLogger":
        """Log info message."""
        return self._log(LogLevel.INFO, message, *args)

    def warning(self, message: Any = MISSING, *args: Any) -> "BaseLogger":
        """Log warning message."""
        return self._log(LogLevel.WARN, message, *args)

    warn = warning

    def error(self, message: Any = MISSING, *args: Any) -> "BaseLogger":
        """Log error message."""
        return self._log(LogLevel.ERROR, message, *args)

    def critical(self, message: Any = MISSING, *args: Any) -> "BaseLogger":
        """Log critical message."""
        return self._log(LogLevel.CRITICAL, message, *args)

    # -- hooks ------------------------------------------------------------

    def _publish(
        self,
        kind: HookKind,
        scope: Optional[Scope] = None,
        params: tuple = (),
        level: Optional[LogLevel] = None,
    ) -> None:
        self._hooks.publish(HookEvent(kind, self, scope, params, level))

    def __repr__(self) -> str:
        """String representation."""
        return f"{type(self).__name__}<{self.type_string}>"


class SinkLogger(BaseLogger, ABC):
    """
    Base class for loggers that perform an output side effect.

    Subclasses implement write(); emit() gates, builds the prefix, formats,
    writes, counts and publishes hooks. AFTER_EMIT is published on every
    path, including gated-out calls and formatter or writer failures.
    """

    def emit(
        self,
        level: LogLevel = LogLevel.INFO,
        event_id: EventLike = 0,
        state: Any = MISSING,
        error: Any = None,
        formatter: Optional[Formatter] = None,
    ) -> "SinkLogger":
        self._publish(
            HookKind.BEFORE_EMIT,
            params=(level, event_id, state, error, formatter),
            level=level,
        )
        try:
            level = LogLevel.coerce(level)
            if not self.is_enabled(level):
                return self

            now = datetime.now()
            message = LogMessage(
                level=level,
                text=(formatter or self._formatter)(state, error),
                prefix=self.build_prefix(event_id, now),
                event_id=event_id,
                state=state,
                error=error,
                source_name=self._source_name,
                timestamp=now,
            )
            self.write(message)
            self._num_messages_logged += 1
            self._publish(HookKind.MESSAGE_EMITTED, params=(message.full_text,), level=level)
            return self
        finally:
            self._publish(HookKind.AFTER_EMIT, level=level)

    @abstractmethod
    def write(self, message: LogMessage) -> None:
        """
        Perform the sink's side effect.

        Args:
            message: The message to output; str(message) is the full line
        """
