"""Cancel-aware fetch operations over :class:`~dogview.domain.ports.DogApiPort`.

Every operation takes the :class:`RequestToken` of the load it belongs to and
runs its blocking adapter call through :meth:`RequestToken.run_io`, so a
superseded load never returns data.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import List, Sequence

from dogview.domain.entities import Breed, BreedId, ImageResult
from dogview.domain.errors import TransportError
from dogview.domain.ports import DogApiPort
from dogview.usecases.request_token import RequestToken

log = logging.getLogger(__name__)


@dataclass
class DogFetcher:
    """Async facade over the REST adapter used by the load use cases."""

    dog_api: DogApiPort

    async def fetch_random_images(self, limit: int, cancel: RequestToken) -> List[ImageResult]:
        """Fetch up to ``limit`` images that already carry breed info."""
        return await cancel.run_io(self.dog_api.search_images, limit=limit)

    async def fetch_images_by_breed(
        self, breed_id: BreedId, limit: int, cancel: RequestToken
    ) -> List[ImageResult]:
        return await cancel.run_io(self.dog_api.search_images, limit=limit, breed_id=breed_id)

    async def search_breeds(self, query: str, cancel: RequestToken) -> List[Breed]:
        """Search breeds by name.

        Raises:
            ValueError: If ``query`` is empty; callers branch to ``list_breeds``.
        """
        cleaned = str(query or "").strip()
        if not cleaned:
            raise ValueError("search_breeds requires a non-empty query")
        return await cancel.run_io(self.dog_api.search_breeds, cleaned)

    async def list_breeds(self, cancel: RequestToken) -> List[Breed]:
        return await cancel.run_io(self.dog_api.list_breeds)

    async def enrich(
        self, items: Sequence[ImageResult], cancel: RequestToken
    ) -> List[ImageResult]:
        """Attach breed info to images that arrived without any.

        Detail lookups run concurrently and are awaited together. A transport
        failure on one lookup keeps that item as it came; it never fails the
        batch. Cancellation still propagates.
        """
        if all(item.breeds for item in items):
            return list(items)
        return list(await asyncio.gather(*(self._enrich_one(item, cancel) for item in items)))

    async def _enrich_one(self, item: ImageResult, cancel: RequestToken) -> ImageResult:
        if item.breeds:
            return item
        try:
            detail = await cancel.run_io(self.dog_api.get_image, item.id)
        except TransportError as exc:
            log.debug("Breed lookup for image %s failed: %s", item.id, exc)
            return item
        return item.with_breeds(detail.breeds)


__all__ = ["DogFetcher"]
