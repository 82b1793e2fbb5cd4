"""Domain package exports for value objects and errors."""

from .entities import (
    LIMIT_OPTIONS,
    VIEW_MODES,
    Breed,
    BreedId,
    ImageResult,
    UIState,
    ViewMode,
)
from .errors import (
    EmptyResultError,
    LoadCancelledError,
    QueryValidationError,
    TransportError,
)

__all__ = [
    "Breed",
    "BreedId",
    "EmptyResultError",
    "ImageResult",
    "LIMIT_OPTIONS",
    "LoadCancelledError",
    "QueryValidationError",
    "TransportError",
    "UIState",
    "VIEW_MODES",
    "ViewMode",
]
