"""Fan-out logger"""

from typing import Any, Optional

from scoped_logger.composite.composite_logger import CompositeLogger
from scoped_logger.core.base_logger import Emitter
from scoped_logger.core.logger_config import LoggerConfig


class DualLogger(CompositeLogger):
    """
    Send every message to two independent loggers.

    The DualLogger never changes the settings of its loggers and does not
    take part in their scopes: configure and scope the child loggers
    directly. Its own level is not consulted; each child gates for itself.
    Dual loggers can be nested to fan out to more sinks.

    Example:
        console = ConsoleLogger("app")
        memory = MemoryLogger("app")
        logger = DualLogger("app", console, memory)
        logger.info("sent to both")
    """

    def __init__(
        self,
        source: Any,
        first: Emitter,
        second: Emitter,
        config: Optional[LoggerConfig] = None,
    ):
        """
        Initialize dual logger.

        Args:
            source: Source identity of the dual logger itself
            first: Logger called first
            second: Logger called second
            config: Logger configuration
        """
        super().__init__(source, first, second, config)

    @property
    def first(self) -> Emitter:
        return self._first

    @property
    def second(self) -> Emitter:
        return self._second
