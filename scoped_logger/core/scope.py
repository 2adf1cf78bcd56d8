"""
Scopes and the scope registry

A scope is a nested logical context pushed around a unit of work and
rendered into log output. Scope stacks are keyed by a logger's source
identity, not by logger instance: every logger built for the same source
(and sharing a registry) sees one stack.

Ownership:
    ScopeRegistry.default() is a process-wide registry shared by all loggers
    unless they are built with isolated scopes, in which case the logger owns
    a private ScopeRegistry. A WrappedLogger points its wrapped loggers at its
    own registry. Nothing else mutates a registry.
"""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Any, Dict, Hashable, List, Optional, Tuple

from scoped_logger.core.exceptions import ScopeNotKnownError, ScopeNotOnTopError
from scoped_logger.formatters.value_formatter import MISSING, format_value

if TYPE_CHECKING:
    from scoped_logger.core.base_logger import BaseLogger


def source_name(source: Any) -> str:
    """
    Get the text name of a logger source identity.

    Args:
        source: A string, or a class or function (anything with ``__name__``)

    Returns:
        The name

    Raises:
        TypeError: If the source cannot be named as text
    """
    if isinstance(source, str):
        return source
    name = getattr(source, "__name__", None)
    if isinstance(name, str) and (isinstance(source, type) or callable(source)):
        return name
    raise TypeError(
        f"The given source is not a string, class or function: {source!r}"
    )


class Scope:
    """
    Immutable marker for one entry on a scope stack.

    Holds the caller's value and a weak reference to the logger that
    created it.
    """

    __slots__ = ("_value", "_logger_ref", "__weakref__")

    def __init__(self, value: Any, logger: "BaseLogger"):
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_logger_ref", weakref.ref(logger))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Scope is immutable")

    @property
    def value(self) -> Any:
        """The value this scope was begun with."""
        return self._value

    @property
    def logger(self) -> Optional["BaseLogger"]:
        """The logger that began this scope, or None if it is gone."""
        return self._logger_ref()

    def __str__(self) -> str:
        if self._value is MISSING:
            return ""
        if isinstance(self._value, str):
            return self._value
        return format_value(self._value)

    def __repr__(self) -> str:
        return f"Scope({self._value!r})"


class ScopeRegistry:
    """
    Maps source identities to LIFO scope stacks.

    Not thread-safe. Loggers are expected to be used from a single thread
    or event loop; concurrent async users of one source must open and
    close their scopes in LIFO order.
    """

    _default: Optional["ScopeRegistry"] = None

    def __init__(self):
        self._stacks: Dict[Hashable, List[Scope]] = {}

    @classmethod
    def default(cls) -> "ScopeRegistry":
        """Get the process-wide registry."""
        if cls._default is None:
            cls._default = cls()
        return cls._default

    def has_stack(self, source: Hashable) -> bool:
        """Check whether a stack was ever created for the source."""
        return source in self._stacks

    def stack(self, source: Hashable) -> Tuple[Scope, ...]:
        """
        Get a snapshot of the source's stack, outermost first.

        Args:
            source: Source identity

        Returns:
            Tuple of scopes (empty if there is no stack)
        """
        return tuple(self._stacks.get(source, ()))

    def depth(self, source: Hashable) -> int:
        """Number of open scopes for the source."""
        return len(self._stacks.get(source, ()))

    def push(self, source: Hashable, scope: Scope) -> None:
        """Push a scope, creating the source's stack if needed."""
        self._stacks.setdefault(source, []).append(scope)

    def pop(self, source: Hashable, scope: Scope) -> Scope:
        """
        Pop the topmost scope, which must be the given one.

        The stack is left untouched when this raises.

        Args:
            source: Source identity
            scope: The scope expected on top (compared by identity)

        Returns:
            The popped scope

        Raises:
            ScopeNotKnownError: If no stack exists for the source
            ScopeNotOnTopError: If the stack is empty or scope is not on top
        """
        if source not in self._stacks:
            raise ScopeNotKnownError(source_name(source))

        stack = self._stacks[source]
        if not stack or stack[-1] is not scope:
            raise ScopeNotOnTopError(source_name(source), len(stack))

        return stack.pop()

    def clear(self, source: Optional[Hashable] = None) -> None:
        """
        Drop stacks.

        Args:
            source: Only drop this source's stack; drop all if None
        """
        if source is None:
            self._stacks.clear()
        else:
            self._stacks.pop(source, None)

    def __len__(self) -> int:
        return len(self._stacks)

    def __repr__(self) -> str:
        return f"ScopeRegistry(sources={len(self._stacks)})"
