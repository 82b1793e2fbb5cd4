"""Translate adapter errors into user-facing UseCaseError instances."""

from __future__ import annotations

from typing import Optional

from dogview.adapters.api_errors import (
    ApiClientError,
    ApiError,
    ApiServerError,
    ApiTimeoutError,
)
from dogview.domain.ports import UseCaseError

LOAD_FAILED_MESSAGE = "Could not load dog data right now. Please try again later."


def map_api_error(
    exc: Exception,
    *,
    default_code: str,
    default_message: Optional[str] = None,
) -> UseCaseError:
    """Map adapter exceptions to stable UseCaseError codes.

    The code tells failures apart for logging. Every mapped error carries the
    same retry-later message, since the UI has nothing more useful to offer
    than trying again.

    Args:
        exc: Exception raised while loading.
        default_code: Code used for exceptions outside the ApiError family.
        default_message: Message override for those exceptions.

    Returns:
        UseCaseError: ``exc`` itself when it already is one.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, ApiTimeoutError):
        return UseCaseError("REQUEST_TIMEOUT", LOAD_FAILED_MESSAGE)
    if isinstance(exc, ApiClientError):
        if exc.status in (401, 403):
            return UseCaseError("AUTH_FAILED", LOAD_FAILED_MESSAGE)
        return UseCaseError("REQUEST_FAILED", LOAD_FAILED_MESSAGE)
    if isinstance(exc, ApiServerError):
        return UseCaseError("SERVER_ERROR", LOAD_FAILED_MESSAGE)
    if isinstance(exc, ApiError):
        return UseCaseError("API_ERROR", LOAD_FAILED_MESSAGE)

    return UseCaseError(default_code, default_message or LOAD_FAILED_MESSAGE)


__all__ = ["LOAD_FAILED_MESSAGE", "map_api_error"]
