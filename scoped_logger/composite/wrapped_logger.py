"""
Wrapping logger

Mimics a primary logger while copying everything it logs to a secondary
logger, keeping the settings and the scope stack of both in sync.
"""

from typing import Any, Optional

from scoped_logger.composite.composite_logger import CompositeLogger
from scoped_logger.composite.dual_logger import DualLogger
from scoped_logger.core.base_logger import BaseLogger, Emitter
from scoped_logger.core.log_level import LogLevel
from scoped_logger.core.scope import ScopeRegistry
from scoped_logger.formatters.default_formatter import Formatter


def _set_through(logger: Emitter, name: str, value: Any) -> None:
    """Set a setting on a logger and on every logger a DualLogger fans out to."""
    setattr(logger, name, value)
    if isinstance(logger, DualLogger):
        for emitter in logger.emitters:
            _set_through(emitter, name, value)


class WrappedLogger(CompositeLogger):
    """
    Wrap a primary logger and replicate it into a secondary logger.

    The wrapper takes the primary's source and settings. Settings must be
    changed on the wrapper: every write goes to the wrapper, the primary
    and the secondary. Changing the primary or secondary directly is not
    propagated anywhere. A DualLogger in either position passes these
    settings on to the loggers it fans out to.

    Immediately before each emit the wrapper points both loggers at its
    own scope registry and copies its source and settings into the
    secondary again. This keeps a secondary that is shared by several
    wrappers in line with whichever wrapper is currently emitting.

    Example:
        shared_audit = MemoryLogger("audit", capacity=10000)

        def logger_for(source):
            return WrappedLogger(ConsoleLogger(source), shared_audit)
    """

    def __init__(self, primary: Emitter, secondary: Emitter):
        """
        Initialize wrapped logger.

        Args:
            primary: Logger to mimic
            secondary: Logger receiving a copy of every message
        """
        _set_through(secondary, "source", primary.source)
        super().__init__(primary.source, primary, secondary)
        self._scope_registry = primary.scope_registry
        self._write_through("scope_registry", self._scope_registry)

        self.level = primary.level
        self.log_time = primary.log_time
        self.log_date = primary.log_date
        self.log_type = primary.log_type
        self.log_scope = primary.log_scope
        self.formatter = primary.formatter

    @property
    def primary(self) -> Emitter:
        return self._first

    @property
    def secondary(self) -> Emitter:
        return self._second

    def _prepare(self) -> None:
        self._write_through("scope_registry", self._scope_registry)

        secondary = self._second
        _set_through(secondary, "source", self._source)
        _set_through(secondary, "level", self._level)
        _set_through(secondary, "log_time", self._log_time)
        _set_through(secondary, "log_date", self._log_date)
        _set_through(secondary, "log_type", self._log_type)
        _set_through(secondary, "log_scope", self._log_scope)
        _set_through(secondary, "formatter", self._formatter)

    def _write_through(self, name: str, value: Any) -> None:
        _set_through(self._first, name, value)
        _set_through(self._second, name, value)

    # Settings write through to both wrapped loggers

    @BaseLogger.level.setter
    def level(self, value: LogLevel) -> None:
        BaseLogger.level.fset(self, value)
        self._write_through("level", self._level)

    @BaseLogger.log_time.setter
    def log_time(self, value: bool) -> None:
        BaseLogger.log_time.fset(self, value)
        self._write_through("log_time", self._log_time)

    @BaseLogger.log_date.setter
    def log_date(self, value: bool) -> None:
        BaseLogger.log_date.fset(self, value)
        self._write_through("log_date", self._log_date)

    @BaseLogger.log_type.setter
    def log_type(self, value: bool) -> None:
        BaseLogger.log_type.fset(self, value)
        self._write_through("log_type", self._log_type)

    @BaseLogger.log_scope.setter
    def log_scope(self, value: bool) -> None:
        BaseLogger.log_scope.fset(self, value)
        self._write_through("log_scope", self._log_scope)

    @BaseLogger.formatter.setter
    def formatter(self, value: Optional[Formatter]) -> None:
        BaseLogger.formatter.fset(self, value)
        self._write_through("formatter", self._formatter)

    @BaseLogger.scope_registry.setter
    def scope_registry(self, value: ScopeRegistry) -> None:
        BaseLogger.scope_registry.fset(self, value)
        self._write_through("scope_registry", self._scope_registry)
