"""
Exceptions raised by the logger core

Every failure surfaces synchronously to the caller; nothing is retried.
"""


class LoggerError(Exception):
    """Base class for all logger errors."""


class ScopeError(LoggerError):
    """Base class for scope discipline violations."""


class ScopeNotKnownError(ScopeError):
    """Raised when ending a scope for a source that has no scope stack."""

    def __init__(self, source_name: str):
        self.source_name = source_name
        super().__init__(
            f"The given scope is not internally known and may belong to a "
            f"different logger (source: {source_name!r})."
        )


class ScopeNotOnTopError(ScopeError):
    """Raised when the scope being ended is not the topmost one."""

    def __init__(self, source_name: str, depth: int):
        self.source_name = source_name
        self.depth = depth
        super().__init__(
            f"The given scope is not on top of the stack or the stack is "
            f"empty (source: {source_name!r}, depth: {depth})."
        )
