"""
Writable text stream that logs what is written to it

Lets code that prints (or any API expecting a file object) feed a logger.
"""

import codecs
import io
from typing import Optional, Union

from scoped_logger.core.base_logger import Emitter
from scoped_logger.core.log_level import LogLevel


class LoggerPipe(io.TextIOBase):
    """
    Text stream emitting every complete line as a log message.

    Lines are buffered until a newline arrives or the pipe is flushed or
    closed. Blank lines are dropped. Bytes are decoded incrementally with
    the pipe's encoding, so a character may be split across writes;
    undecodable bytes become U+FFFD. A pipe that is garbage collected
    without being closed drops its partial line.

    Example:
        with contextlib.redirect_stdout(LoggerPipe(logger)):
            print("captured")
    """

    def __init__(
        self,
        logger: Emitter,
        level: Optional[LogLevel] = None,
        encoding: str = "utf-8",
    ):
        """
        Initialize logger pipe.

        Args:
            logger: Logger receiving the lines
            level: Level to emit at (default: the logger's current level)
            encoding: Encoding used for bytes written to the pipe
        """
        super().__init__()
        self._logger = logger
        self._level = level
        self._encoding = encoding
        self._buffer = ""
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")

    @property
    def logger(self) -> Emitter:
        return self._logger

    @property
    def level(self) -> LogLevel:
        """Level lines are emitted at."""
        return self._level if self._level is not None else self._logger.level

    @property
    def encoding(self) -> str:
        return self._encoding

    def writable(self) -> bool:
        return True

    def write(self, text: Union[str, bytes]) -> int:
        """
        Buffer text and emit every completed line.

        Returns:
            Number of characters (or bytes) written

        Raises:
            ValueError: If the pipe is closed
        """
        if self.closed:
            raise ValueError("I/O operation on closed pipe")
        size = len(text)
        if isinstance(text, (bytes, bytearray)):
            text = self._decoder.decode(bytes(text))

        self._buffer += text
        *lines, self._buffer = self._buffer.split("\n")
        for line in lines:
            self._emit_line(line)
        return size

    def flush(self) -> None:
        """Emit any buffered partial line."""
        if self._buffer:
            line, self._buffer = self._buffer, ""
            self._emit_line(line)

    def close(self) -> None:
        """Emit any buffered text, including undecoded trailing bytes, and close."""
        if not self.closed:
            self._buffer += self._decoder.decode(b"", final=True)
        super().close()

    def __del__(self) -> None:
        self._buffer = ""
        self._decoder.reset()
        super().close()

    def _emit_line(self, line: str) -> None:
        line = line.rstrip("\r")
        if line.strip():
            self._logger.emit(self.level, 0, line)
