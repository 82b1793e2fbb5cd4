"""Domain-level error types for use-case and adapter mapping.

These errors cross layer boundaries without leaking transport-specific
exception details. Adapter exceptions derive from :class:`TransportError`.
"""

from __future__ import annotations

from typing import Optional


class TransportError(RuntimeError):
    """Network failure, non-success HTTP status, or unreadable response."""


class EmptyResultError(Exception):
    """A well-formed response carried zero items.

    Not a fault: the view model renders ``message`` as an empty state.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class QueryValidationError(ValueError):
    """Submitted search text is too short to send."""

    def __init__(self, message: str, *, query: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.query = query


class LoadCancelledError(Exception):
    """A newer load superseded the one that raised this."""

    def __init__(self, serial: Optional[int] = None) -> None:
        super().__init__(f"load #{serial} superseded" if serial is not None else "load superseded")
        self.serial = serial


__all__ = [
    "EmptyResultError",
    "LoadCancelledError",
    "QueryValidationError",
    "TransportError",
]
