"""Hand-written DogApiPort fake shared by the use-case and view-model tests."""

from __future__ import annotations

import threading
from typing import Any, Dict, List, Optional, Sequence

from dogview.domain.entities import Breed, ImageResult
from dogview.domain.ports import DogApiPort

PUG = Breed(id=201, name="Pug", temperament="Docile, Clever", life_span="12 - 14 years", weight_metric="6 - 8")
LAB = Breed(id=121, name="Labrador Retriever", life_span="10 - 13 years")


def make_images(count: int, *, breed: Optional[Breed] = PUG, prefix: str = "img") -> List[ImageResult]:
    breeds = (breed,) if breed is not None else ()
    return [ImageResult(id=f"{prefix}{i}", url=f"https://cdn.example/{prefix}{i}.jpg", breeds=breeds) for i in range(count)]


class FakeDogApi(DogApiPort):
    """Records calls; optional gate blocks ``search_images`` until released."""

    def __init__(
        self,
        *,
        images: Sequence[ImageResult] = (),
        breeds: Sequence[Breed] = (),
        details: Optional[Dict[str, Any]] = None,
        gate: Optional[threading.Event] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.images = list(images)
        self.breeds = list(breeds)
        self.details = dict(details or {})
        self.gate = gate
        self.error = error
        self.calls: List[tuple] = []
        self.started = threading.Event()

    def search_images(self, *, limit: int, breed_id: Any = None) -> List[ImageResult]:
        self.calls.append(("search_images", limit, breed_id))
        self.started.set()
        if self.gate is not None:
            self.gate.wait(timeout=5)
        if self.error is not None:
            raise self.error
        return self.images[:limit]

    def get_image(self, image_id: str) -> ImageResult:
        self.calls.append(("get_image", image_id))
        detail = self.details.get(image_id)
        if isinstance(detail, Exception):
            raise detail
        if detail is None:
            raise KeyError(image_id)
        return detail

    def search_breeds(self, query: str) -> List[Breed]:
        self.calls.append(("search_breeds", query))
        if self.error is not None:
            raise self.error
        return [b for b in self.breeds if query.lower() in b.name.lower()]

    def list_breeds(self) -> List[Breed]:
        self.calls.append(("list_breeds",))
        if self.error is not None:
            raise self.error
        return list(self.breeds)

    def call_names(self) -> List[str]:
        return [call[0] for call in self.calls]
