"""Use case that loads the image feed, optionally filtered by breed name."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from dogview.domain.entities import ImageResult, UIState
from dogview.domain.errors import EmptyResultError
from dogview.usecases.fetch_dogs import DogFetcher
from dogview.usecases.request_token import RequestToken

log = logging.getLogger(__name__)

NO_DATA_MESSAGE = "No dog data found."


def no_breeds_message(query: str) -> str:
    return f'No breeds found for "{query}".'


def no_images_message(query: str) -> str:
    return f'No images found for "{query}".'


@dataclass
class LoadImages:
    """Run the image fetch sequence for one state snapshot.

    Without a query: random images, then enrichment. With a query: breed
    search first, then images of the first matched breed, then enrichment.
    The breed search is consumed before the image fetch is issued.
    """

    fetcher: DogFetcher

    async def __call__(self, state: UIState, token: RequestToken) -> List[ImageResult]:
        if not state.query:
            items = await self.fetcher.fetch_random_images(state.limit, token)
            filled = await self.fetcher.enrich(items, token)
            result = self._renderable(filled, state.limit)
            if not result:
                raise EmptyResultError(NO_DATA_MESSAGE)
            return result

        breeds = await self.fetcher.search_breeds(state.query, token)
        if not breeds:
            raise EmptyResultError(no_breeds_message(state.query))
        breed = breeds[0]
        log.debug("Query %r matched breed %s (%s)", state.query, breed.id, breed.name)

        items = await self.fetcher.fetch_images_by_breed(breed.id, state.limit, token)
        if not items:
            raise EmptyResultError(no_images_message(state.query))
        filled = await self.fetcher.enrich(items, token)
        result = self._renderable(filled, state.limit)
        if not result:
            raise EmptyResultError(no_images_message(state.query))
        return result

    @staticmethod
    def _renderable(items: List[ImageResult], limit: int) -> List[ImageResult]:
        return [item for item in items if item.url][:limit]


__all__ = ["LoadImages", "NO_DATA_MESSAGE", "no_breeds_message", "no_images_message"]
