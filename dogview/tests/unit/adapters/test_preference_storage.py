from __future__ import annotations

import os

import pytest

from dogview.adapters.dog_api_mock import DogApiMock
from dogview.adapters.api_errors import ApiClientError
from dogview.adapters.storage_local import StorageLocal
from dogview.adapters.storage_memory import MemoryPreferenceStore


def test_user_settings_roundtrip(tmp_path) -> None:
    storage = StorageLocal(root_dir=str(tmp_path))
    settings = {"api_base_url": "https://dogs.example/v1", "request_timeout_s": 5}

    storage.save_user_settings(settings)

    assert storage.load_user_settings() == settings
    assert [name for name in os.listdir(tmp_path) if name.endswith(".tmp")] == []


def test_user_settings_missing_and_non_object(tmp_path) -> None:
    storage = StorageLocal(root_dir=str(tmp_path))
    assert storage.load_user_settings() is None

    (tmp_path / StorageLocal.SETTINGS_FILE).write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ValueError):
        storage.load_user_settings()


def test_user_settings_created_in_missing_directory(tmp_path) -> None:
    storage = StorageLocal(root_dir=str(tmp_path / "nested"))

    storage.save_user_settings({"api_key": "k"})

    assert (tmp_path / "nested" / StorageLocal.SETTINGS_FILE).exists()
    assert storage.load_user_settings() == {"api_key": "k"}


def test_memory_store_counts_writes() -> None:
    store = MemoryPreferenceStore({"a": "1"})

    store.set_blob("b", "2")
    store.set_blob("b", "3")

    assert store.get_blob("a") == "1"
    assert store.get_blob("b") == "3"
    assert store.get_blob("missing") is None
    assert store.writes == 2


def test_mock_api_search_and_filtering() -> None:
    api = DogApiMock()

    assert [b.name for b in api.search_breeds("PUG")] == ["Pug"]
    assert len(api.search_images(limit=5)) == 5
    by_breed = api.search_images(limit=30, breed_id=121)
    assert len(by_breed) == api.images_per_breed
    assert {img.primary_breed.name for img in by_breed} == {"Labrador Retriever"}


def test_mock_api_unknown_image_is_not_found() -> None:
    api = DogApiMock()

    with pytest.raises(ApiClientError) as excinfo:
        api.get_image("nope")

    assert excinfo.value.status == 404
