from __future__ import annotations

from typing import List, Optional, Protocol

from .entities import Breed, BreedId, ImageResult


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
DEFAULT_API_BASE = "https://api.thedogapi.com/v1"


class DogApiPort(Protocol):
    """Read-only operations against TheDogAPI.

    Implementations block on network I/O; the fetcher runs them in worker
    threads. Failures raise ``TransportError`` subclasses.
    """

    def search_images(
        self,
        *,
        limit: int,
        breed_id: Optional[BreedId] = None,
    ) -> List[ImageResult]: ...  # has_breeds=1 when breed_id is None
    def get_image(self, image_id: str) -> ImageResult: ...
    def search_breeds(self, query: str) -> List[Breed]: ...
    def list_breeds(self) -> List[Breed]: ...


class PreferenceStorePort(Protocol):
    """Key-value store for opaque preference blobs (JSON text)."""

    def get_blob(self, key: str) -> Optional[str]: ...
    def set_blob(self, key: str, value: str) -> None: ...
