"""Typed failures raised by the TheDogAPI REST adapter.

TheDogAPI answers errors either as plain text (``"AUTHENTICATION_ERROR"``) or
as a small JSON object such as ``{"message": "..."}``. The helpers below turn
either shape into one readable line for logs.
"""

from __future__ import annotations

from typing import Any, Optional

from dogview.domain.errors import TransportError

_SNIPPET_LIMIT = 400
_MESSAGE_KEYS = ("message", "detail", "error", "title")


class ApiError(TransportError):
    """Base class for REST adapter failures.

    Attributes:
        status: HTTP status when a response was received.
        hint: Short server-provided explanation, if any.
        payload: Decoded error body (JSON value or text snippet).
        context: Endpoint label such as ``"breeds/search"``.
    """

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        hint: Optional[str] = None,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.hint = hint
        self.payload = payload
        self.context = context


class ApiClientError(ApiError):
    """HTTP 4xx: bad key, unknown image id, malformed query."""

    def __init__(self, message: str, *, status: int, **kwargs: Any) -> None:
        super().__init__(message, status=status, **kwargs)


class ApiServerError(ApiError):
    """HTTP 5xx from TheDogAPI."""

    def __init__(self, message: str, *, status: int, **kwargs: Any) -> None:
        super().__init__(message, status=status, **kwargs)


class ApiTimeoutError(ApiError):
    """Timeout or connection failure before any response arrived."""

    def __init__(self, message: str, *, context: Optional[str] = None) -> None:
        super().__init__(message, context=context)


def parse_error_payload(resp: Any) -> Any:
    """Decode an error body as JSON, else return a text snippet (or ``None``)."""
    try:
        return resp.json()
    except Exception:
        text = (getattr(resp, "text", "") or "").strip()
        return text[:_SNIPPET_LIMIT] or None


def error_detail(payload: Any) -> Optional[str]:
    """Pick the first readable message out of an error payload."""
    if isinstance(payload, str):
        return payload.strip() or None
    if isinstance(payload, dict):
        for key in _MESSAGE_KEYS:
            found = error_detail(payload.get(key))
            if found:
                return found
    if isinstance(payload, list):
        for item in payload:
            found = error_detail(item)
            if found:
                return found
    return None


def build_error_message(ctx: str, status: int, payload: Any) -> str:
    detail = error_detail(payload)
    if detail:
        return f"{ctx}: {detail} (HTTP {status})"
    return f"{ctx}: HTTP {status}"


def extract_error_hint(payload: Any) -> Optional[str]:
    detail = error_detail(payload)
    return detail[:200] if detail else None


__all__ = [
    "ApiClientError",
    "ApiError",
    "ApiServerError",
    "ApiTimeoutError",
    "build_error_message",
    "error_detail",
    "extract_error_hint",
    "parse_error_payload",
]
