"""
Composite loggers module

Loggers that forward to other loggers instead of writing anywhere.
"""

from scoped_logger.composite.composite_logger import CompositeLogger
from scoped_logger.composite.dual_logger import DualLogger
from scoped_logger.composite.wrapped_logger import WrappedLogger

__all__ = ["CompositeLogger", "DualLogger", "WrappedLogger"]
