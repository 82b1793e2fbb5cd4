"""Card and status text helpers for the gallery view model.

Call context:
    ``GalleryVM`` calls these helpers to turn domain records into
    ``CardView`` values and status lines.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from dogview.domain.entities import Breed, ImageResult
from dogview.viewmodels.render import CardView

UNKNOWN_BREED = "Unknown breed"


def breed_meta(breed: Optional[Breed]) -> str:
    """Join temperament, life span, and metric weight with ``" | "``."""
    if breed is None:
        return ""
    parts = [
        f"Temperament: {breed.temperament}" if breed.temperament else "",
        f"Life span: {breed.life_span}" if breed.life_span else "",
        f"Weight: {breed.weight_metric} kg" if breed.weight_metric else "",
    ]
    return " | ".join(part for part in parts if part)


def image_card(item: ImageResult) -> CardView:
    breed = item.primary_breed
    return CardView(
        key=f"image:{item.id}",
        title=breed.name if breed else UNKNOWN_BREED,
        image_url=item.url or None,
        alt=f"{breed.name} dog" if breed else "Dog",
        meta=breed_meta(breed),
        more_url=breed.wikipedia_url if breed else None,
    )


def breed_card(breed: Breed) -> CardView:
    return CardView(
        key=f"breed:{breed.id}",
        title=breed.name,
        image_url=breed.image_url,
        alt=f"{breed.name} dog",
        meta=breed_meta(breed),
        more_url=breed.wikipedia_url,
    )


def image_cards(items: Iterable[ImageResult]) -> List[CardView]:
    return [image_card(item) for item in items]


def breed_cards(breeds: Iterable[Breed]) -> List[CardView]:
    return [breed_card(breed) for breed in breeds]


def loaded_label(count: int) -> str:
    return f"Loaded ({count})"


__all__ = [
    "UNKNOWN_BREED",
    "breed_card",
    "breed_cards",
    "breed_meta",
    "image_card",
    "image_cards",
    "loaded_label",
]
