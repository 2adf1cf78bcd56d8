"""Loggers module - Concrete log sinks"""

from scoped_logger.loggers.console_logger import ConsoleConf, ConsoleLogger
from scoped_logger.loggers.dev_null_logger import DevNullLogger
from scoped_logger.loggers.memory_logger import MemoryLogger, MessageOrder
from scoped_logger.loggers.stream_logger import StreamLogger

__all__ = [
    "ConsoleConf",
    "ConsoleLogger",
    "DevNullLogger",
    "MemoryLogger",
    "MessageOrder",
    "StreamLogger",
]
