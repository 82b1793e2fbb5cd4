from __future__ import annotations

from dataclasses import dataclass
from typing import List

from dogview.domain.entities import Breed, UIState
from dogview.domain.errors import EmptyResultError
from dogview.usecases.fetch_dogs import DogFetcher
from dogview.usecases.load_images import no_breeds_message
from dogview.usecases.request_token import RequestToken

NO_BREEDS_MESSAGE = "No breeds found."


@dataclass
class LoadBreeds:
    """Load the breed catalog, or a name search over it, capped at ``limit``."""

    fetcher: DogFetcher

    async def __call__(self, state: UIState, token: RequestToken) -> List[Breed]:
        if state.query:
            breeds = await self.fetcher.search_breeds(state.query, token)
            empty_message = no_breeds_message(state.query)
        else:
            breeds = await self.fetcher.list_breeds(token)
            empty_message = NO_BREEDS_MESSAGE
        if not breeds:
            raise EmptyResultError(empty_message)
        return list(breeds[: state.limit])


__all__ = ["LoadBreeds", "NO_BREEDS_MESSAGE"]
