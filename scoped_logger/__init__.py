"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Scoped Logger - A structured-logging core with per-source scopes,
lifecycle hooks and composable sinks
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from scoped_logger.core.log_level import LogLevel
from scoped_logger.core.exceptions import (
    LoggerError,
    ScopeError,
    ScopeNotKnownError,
    ScopeNotOnTopError,
)
from scoped_logger.core.scope import Scope, ScopeRegistry
from scoped_logger.core.hooks import HookBus, HookEvent, HookKind
from scoped_logger.core.log_message import LogMessage
from scoped_logger.core.logger_config import LoggerConfig
from scoped_logger.core.base_logger import BaseLogger, Emitter, SinkLogger
from scoped_logger.core.logger_builder import LoggerBuilder
from scoped_logger.composite import CompositeLogger, DualLogger, WrappedLogger
from scoped_logger.formatters import (
    MISSING,
    EventId,
    format_default,
    format_error,
    format_event,
    format_value,
)
from scoped_logger.loggers import (
    ConsoleConf,
    ConsoleLogger,
    DevNullLogger,
    MemoryLogger,
    MessageOrder,
    StreamLogger,
)
from scoped_logger.logger_pipe import LoggerPipe

# Import submodules (not all classes by default)
from scoped_logger import formatters
from scoped_logger import monitoring

__all__ = [
    "LogLevel",
    "LoggerError",
    "ScopeError",
    "ScopeNotKnownError",
    "ScopeNotOnTopError",
    "Scope",
    "ScopeRegistry",
    "HookBus",
    "HookEvent",
    "HookKind",
    "LogMessage",
    "LoggerConfig",
    "BaseLogger",
    "Emitter",
    "SinkLogger",
    "LoggerBuilder",
    "CompositeLogger",
    "DualLogger",
    "WrappedLogger",
    "MISSING",
    "EventId",
    "format_default",
    "format_error",
    "format_event",
    "format_value",
    "ConsoleConf",
    "ConsoleLogger",
    "DevNullLogger",
    "MemoryLogger",
    "MessageOrder",
    "StreamLogger",
    "LoggerPipe",
    "formatters",
    "monitoring",
]
