"""
Core module for logger system

This module contains the fundamental classes:
- BaseLogger / SinkLogger: Logger core and concrete-sink base
- Scope / ScopeRegistry: Scope markers and per-source scope stacks
- HookBus / HookEvent / HookKind: Lifecycle notifications
- LogMessage: Record handed to sinks
- LogLevel: Log level enumeration
- LoggerConfig: Configuration management
- LoggerBuilder: Builder pattern for logger construction
"""

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
]
