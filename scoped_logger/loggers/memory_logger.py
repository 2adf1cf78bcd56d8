"""
In-memory logger

Keeps the most recent messages in a bounded FIFO buffer.
"""

from collections import deque
from enum import Enum
from typing import Any, Callable, Deque, Iterator, List, Optional

from scoped_logger.core.base_logger import SinkLogger
from scoped_logger.core.log_message import LogMessage
from scoped_logger.core.logger_config import LoggerConfig


class MessageOrder(Enum):
    """Iteration order for stored messages."""

    OLDEST_FIRST = 1
    NEWEST_FIRST = 2


def _validate_capacity(capacity: int) -> int:
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise TypeError("capacity must be an int")
    if capacity <= 0:
        raise ValueError("capacity must be positive")
    return capacity


class MemoryLogger(SinkLogger):
    """
    Store log messages in memory.

    When the buffer is full the oldest message is evicted. Messages keep
    the text they were formatted with at emission time.

    Example:
        logger = MemoryLogger("worker", capacity=100)
        logger.info("started")
        last = logger.messages_list()[0]
        print(last.text)
    """

    def __init__(
        self,
        source: Any = "",
        capacity: int = 1000,
        config: Optional[LoggerConfig] = None,
    ):
        """
        Initialize memory logger.

        Args:
            source: Source identity (default: empty string)
            capacity: Maximum number of messages kept
            config: Logger configuration
        """
        super().__init__(source, config)
        self._messages: Deque[LogMessage] = deque(maxlen=_validate_capacity(capacity))

    @property
    def capacity(self) -> int:
        """Maximum number of messages kept."""
        return self._messages.maxlen

    @capacity.setter
    def capacity(self, value: int) -> None:
        """
        Change the capacity.

        Lowering it below the current number of messages discards the
        oldest ones.

        Raises:
            TypeError: If value is not an int
            ValueError: If value is not positive
        """
        self._messages = deque(self._messages, maxlen=_validate_capacity(value))

    @property
    def num_messages(self) -> int:
        """Number of messages currently stored."""
        return len(self._messages)

    def write(self, message: LogMessage) -> None:
        """Store the message, evicting the oldest if full."""
        self._messages.append(message)

    def messages(
        self,
        order: MessageOrder = MessageOrder.NEWEST_FIRST,
        predicate: Optional[Callable[[LogMessage], bool]] = None,
    ) -> Iterator[LogMessage]:
        """
        Iterate stored messages.

        Args:
            order: Iteration order
            predicate: Only yield messages for which this returns True

        Returns:
            Iterator over a snapshot of the stored messages
        """
        snapshot = list(self._messages)
        if order is MessageOrder.NEWEST_FIRST:
            snapshot.reverse()
        for message in snapshot:
            if predicate is None or predicate(message):
                yield message

    def messages_list(
        self,
        order: MessageOrder = MessageOrder.NEWEST_FIRST,
        predicate: Optional[Callable[[LogMessage], bool]] = None,
    ) -> List[LogMessage]:
        """Stored messages as a list; see messages()."""
        return list(self.messages(order, predicate))

    def clear(self) -> None:
        """Drop all stored messages."""
        self._messages.clear()

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"MemoryLogger<{self.type_string}>"
            f"(messages={len(self._messages)}, capacity={self.capacity})"
        )
