"""
Value formatter

Turns an arbitrary state value into display text. Values are classified
once into a ValueKind and rendered according to that kind.
"""

from enum import Enum
from typing import Any, Dict


class _Missing:
    """Sentinel type for an absent value (distinct from ``None``)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()

# Nested plain records deeper than this are abbreviated
MAX_INSPECT_DEPTH = 3


class ValueKind(Enum):
    """Rendering capability of a logged value."""

    ABSENT = "absent"
    NULL = "null"
    TEXT = "text"
    ERROR = "error"
    STRUCTURED = "structured"
    CUSTOM = "custom"


def classify(value: Any) -> ValueKind:
    """
    Resolve the rendering kind of a value.

    A value is STRUCTURED when its type defines neither its own ``__str__``
    nor its own ``__repr__``, i.e. it would only render as the generic
    ``<Foo object at 0x...>`` label. Builtins, containers, dataclasses and
    anything else with a text conversion of its own are CUSTOM.

    Args:
        value: Any value, including MISSING

    Returns:
        The ValueKind of the value
    """
    if value is MISSING:
        return ValueKind.ABSENT
    if value is None:
        return ValueKind.NULL
    if isinstance(value, str):
        return ValueKind.TEXT
    if isinstance(value, BaseException):
        return ValueKind.ERROR

    cls = type(value)
    if cls.__str__ is object.__str__ and cls.__repr__ is object.__repr__:
        return ValueKind.STRUCTURED
    return ValueKind.CUSTOM


def _instance_attributes(value: Any) -> Dict[str, Any]:
    attributes: Dict[str, Any] = {}
    for klass in reversed(type(value).__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot in ("__dict__", "__weakref__"):
                continue
            if hasattr(value, slot):
                attributes[slot] = getattr(value, slot)
    attributes.update(getattr(value, "__dict__", {}))
    return attributes


def inspect_value(value: Any, depth: int = 0) -> str:
    """
    Render a plain record structurally, e.g. ``Point(x=1, y=2)``.

    Args:
        value: A STRUCTURED value
        depth: Current nesting depth

    Returns:
        Structural inspection string
    """
    name = type(value).__name__
    if depth >= MAX_INSPECT_DEPTH:
        return f"{name}(...)"

    parts = []
    for key, attr in _instance_attributes(value).items():
        if classify(attr) is ValueKind.STRUCTURED:
            rendered = inspect_value(attr, depth + 1)
        else:
            rendered = repr(attr)
        parts.append(f"{key}={rendered}")
    return f"{name}({', '.join(parts)})"


def format_value(value: Any = MISSING) -> str:
    """
    Format a state value as text.

    Args:
        value: Value to format (MISSING renders as empty text)

    Returns:
        Display text
    """
    kind = classify(value)
    if kind is ValueKind.ABSENT:
        return ""
    if kind is ValueKind.NULL:
        return "null"
    if kind is ValueKind.TEXT:
        return value
    if kind is ValueKind.STRUCTURED:
        return inspect_value(value)
    return str(value)
