"""Event id formatter"""

from typing import Any, NamedTuple, Union

from scoped_logger.formatters.value_formatter import MISSING, format_value


class EventId(NamedTuple):
    """Numeric event id with a name."""

    id: int
    name: str = ""


EventLike = Union[int, EventId]


def format_event(event_id: Any = MISSING) -> str:
    """
    Format an event id.

    Args:
        event_id: int, EventId or any other value

    Returns:
        ``"42"`` for ints, ``"42/name"`` for EventId, otherwise format_value
    """
    if isinstance(event_id, EventId):
        return f"{event_id.id}/{event_id.name}"
    if isinstance(event_id, int) and not isinstance(event_id, bool):
        return str(event_id)
    return format_value(event_id)


def is_no_event(event_id: Any) -> bool:
    """True for the "no event" markers: 0, None and MISSING."""
    if event_id is MISSING or event_id is None:
        return True
    return isinstance(event_id, int) and not isinstance(event_id, bool) and event_id == 0
