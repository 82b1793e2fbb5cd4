from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from dogview.domain.entities import Breed, BreedId, ImageResult
from dogview.domain.ports import DogApiPort

from .api_errors import ApiClientError

_SAMPLE_BREEDS = (
    Breed(
        id=1,
        name="Affenpinscher",
        temperament="Stubborn, Curious, Playful, Adventurous, Active, Fun-loving",
        life_span="10 - 12 years",
        weight_metric="3 - 6",
        weight_imperial="6 - 13",
        wikipedia_url="https://en.wikipedia.org/wiki/Affenpinscher",
        bred_for="Small rodent hunting, lapdog",
        breed_group="Toy",
    ),
    Breed(
        id=121,
        name="Labrador Retriever",
        temperament="Kind, Outgoing, Agile, Gentle, Intelligent, Trusting, Even Tempered",
        life_span="10 - 13 years",
        weight_metric="25 - 36",
        weight_imperial="55 - 80",
        wikipedia_url="https://en.wikipedia.org/wiki/Labrador_Retriever",
        bred_for="Water retrieving",
        breed_group="Sporting",
    ),
    Breed(
        id=201,
        name="Pug",
        temperament="Docile, Clever, Charming, Stubborn, Sociable, Playful, Quiet, Attentive",
        life_span="12 - 14 years",
        weight_metric="6 - 8",
        weight_imperial="14 - 18",
        wikipedia_url="https://en.wikipedia.org/wiki/Pug",
        bred_for="Lapdog",
        breed_group="Toy",
    ),
)


@dataclass
class DogApiMock(DogApiPort):
    """Offline substitute for ``DogApiRestAdapter`` with deterministic responses."""

    breeds: List[Breed] = field(default_factory=lambda: list(_SAMPLE_BREEDS))
    images_per_breed: int = 4

    def __post_init__(self) -> None:
        self._images: Dict[str, ImageResult] = {}
        for breed in self.breeds:
            for idx in range(self.images_per_breed):
                image_id = f"mock-{breed.id}-{idx}"
                self._images[image_id] = ImageResult(
                    id=image_id,
                    url=f"https://placedog.net/640/480?id={breed.id}{idx}",
                    breeds=(breed,),
                )

    # ---------- DogApiPort ----------

    def search_images(
        self,
        *,
        limit: int,
        breed_id: Optional[BreedId] = None,
    ) -> List[ImageResult]:
        images = list(self._images.values())
        if breed_id is not None:
            images = [img for img in images if str(img.breeds[0].id) == str(breed_id)]
        return images[: max(0, int(limit))]

    def get_image(self, image_id: str) -> ImageResult:
        try:
            return self._images[image_id]
        except KeyError:
            ctx = f"images[{image_id}]"
            raise ApiClientError(f"{ctx}: HTTP 404", status=404, context=ctx) from None

    def search_breeds(self, query: str) -> List[Breed]:
        needle = str(query or "").strip().lower()
        return [breed for breed in self.breeds if needle in breed.name.lower()]

    def list_breeds(self) -> List[Breed]:
        return list(self.breeds)
