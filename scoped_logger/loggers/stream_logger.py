"""Logger writing to text streams, one stream per level"""

from typing import Any, Mapping, Optional, TextIO

from scoped_logger.core.base_logger import SinkLogger
from scoped_logger.core.log_level import EMITTABLE_LEVELS, LogLevel
from scoped_logger.core.log_message import LogMessage
from scoped_logger.core.logger_config import LoggerConfig


class StreamLogger(SinkLogger):
    """
    Write log lines to text streams.

    Each level maps to a stream; several levels may share one. Messages
    at a level without a stream are counted but not written.
    """

    def __init__(
        self,
        source: Any,
        stream_conf: Mapping[LogLevel, TextIO],
        config: Optional[LoggerConfig] = None,
    ):
        """
        Initialize stream logger.

        Args:
            source: Source identity
            stream_conf: Mapping of level to output stream
            config: Logger configuration
        """
        super().__init__(source, config)
        self._streams = dict(stream_conf)

    @classmethod
    def from_one_stream(
        cls,
        source: Any,
        stream: TextIO,
        config: Optional[LoggerConfig] = None,
    ) -> "StreamLogger":
        """
        Create a stream logger writing every level to the same stream.

        Args:
            source: Source identity
            stream: Output stream
            config: Logger configuration

        Returns:
            New StreamLogger
        """
        return cls(source, {level: stream for level in EMITTABLE_LEVELS}, config)

    @property
    def stream_conf(self) -> Mapping[LogLevel, TextIO]:
        """Mapping of level to output stream."""
        return self._streams

    @stream_conf.setter
    def stream_conf(self, value: Mapping[LogLevel, TextIO]) -> None:
        self._streams = dict(value)

    def write(self, message: LogMessage) -> None:
        """Write the message as one line to the level's stream."""
        stream = self._streams.get(message.level)
        if stream is None:
            return

        stream.write(str(message) + "\n")
        if hasattr(stream, "flush"):
            stream.flush()
