from __future__ import annotations

from dogview.domain.entities import Breed, ImageResult
from dogview.viewmodels.card_format import (
    UNKNOWN_BREED,
    breed_card,
    breed_meta,
    image_card,
    loaded_label,
)

PUG = Breed(
    id=201,
    name="Pug",
    temperament="Docile, Clever",
    life_span="12 - 14 years",
    weight_metric="6 - 8",
    wikipedia_url="https://en.wikipedia.org/wiki/Pug",
    image_url="https://cdn.example/pug.jpg",
)


def test_breed_meta_joins_known_parts() -> None:
    assert breed_meta(PUG) == "Temperament: Docile, Clever | Life span: 12 - 14 years | Weight: 6 - 8 kg"
    assert breed_meta(Breed(id=1, name="Mystery", life_span="10 years")) == "Life span: 10 years"
    assert breed_meta(None) == ""


def test_image_card_uses_first_breed() -> None:
    item = ImageResult(id="a1", url="https://cdn.example/a1.jpg", breeds=(PUG, Breed(id=2, name="Other")))

    card = image_card(item)

    assert card.key == "image:a1"
    assert card.title == "Pug"
    assert card.alt == "Pug dog"
    assert card.image_url == "https://cdn.example/a1.jpg"
    assert card.more_url == "https://en.wikipedia.org/wiki/Pug"


def test_image_card_without_breed_is_unknown() -> None:
    card = image_card(ImageResult(id="a2", url="https://cdn.example/a2.jpg"))

    assert card.title == UNKNOWN_BREED
    assert card.alt == "Dog"
    assert card.meta == ""
    assert card.more_url is None


def test_breed_card_and_status_label() -> None:
    card = breed_card(PUG)

    assert card.key == "breed:201"
    assert card.image_url == "https://cdn.example/pug.jpg"
    assert loaded_label(6) == "Loaded (6)"
