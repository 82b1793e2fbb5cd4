from __future__ import annotations

import pytest

from dogview.domain.entities import Breed, ImageResult, UIState, parse_breeds


def test_breed_from_payload_reads_nested_fields() -> None:
    breed = Breed.from_payload(
        {
            "id": 121,
            "name": " Labrador Retriever ",
            "weight": {"metric": "25 - 36", "imperial": "55 - 80"},
            "image": {"url": "https://cdn.example/lab.jpg"},
            "temperament": "",
        }
    )

    assert breed.name == "Labrador Retriever"
    assert breed.weight_metric == "25 - 36"
    assert breed.image_url == "https://cdn.example/lab.jpg"
    assert breed.temperament is None


@pytest.mark.parametrize("payload", [{"name": "Pug"}, {"id": 1}, {"id": 1, "name": "  "}, "Pug"])
def test_breed_from_payload_rejects_unusable_entries(payload) -> None:
    with pytest.raises(ValueError):
        Breed.from_payload(payload)


def test_parse_breeds_skips_bad_entries() -> None:
    breeds = parse_breeds([{"id": 1, "name": "Pug"}, {"id": 2}, None])

    assert [b.name for b in breeds] == ["Pug"]
    assert parse_breeds({"id": 1}) == ()


def test_image_result_payload_and_primary_breed() -> None:
    image = ImageResult.from_payload({"id": "x1", "url": "https://cdn.example/x1.jpg", "breeds": []})

    assert image.primary_breed is None
    enriched = image.with_breeds([Breed(id=1, name="Pug")])
    assert enriched.primary_breed.name == "Pug"
    assert image.breeds == ()


def test_ui_state_defaults_and_transitions() -> None:
    state = UIState()

    assert state.to_payload() == {"limit": 12, "view": "images", "query": ""}
    assert state.with_query("  pug ").query == "pug"
    with pytest.raises(ValueError):
        state.with_limit(7)
    with pytest.raises(ValueError):
        state.with_limit(True)
    with pytest.raises(ValueError):
        state.with_view("grid")


@pytest.mark.parametrize(
    "payload, expected",
    [
        (None, UIState()),
        ([], UIState()),
        ({"limit": 30, "view": "breeds", "query": "pug"}, UIState(limit=30, view="breeds", query="pug")),
        ({"limit": "20", "view": "cards", "query": 5}, UIState()),
        ({"limit": 6.0, "query": "x"}, UIState(limit=6)),
    ],
)
def test_ui_state_from_payload_falls_back_per_field(payload, expected) -> None:
    assert UIState.from_payload(payload) == expected
