"""Logger that discards every message"""

from typing import Any, Optional

from scoped_logger.core.base_logger import SinkLogger
from scoped_logger.core.log_message import LogMessage
from scoped_logger.core.logger_config import LoggerConfig


class DevNullLogger(SinkLogger):
    """
    Discard log messages.

    Gating, counting and hooks behave as for any other sink; only the
    output is thrown away. Useful as a placeholder and in tests.
    """

    def __init__(self, source: Any = "", config: Optional[LoggerConfig] = None):
        super().__init__(source, config)

    def write(self, message: LogMessage) -> None:
        """Discard the message."""
