"""Domain value objects shared across adapters, use-cases, and view models."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, Literal, Mapping, Optional, Tuple, Union

BreedId = Union[int, str]
ViewMode = Literal["images", "breeds"]

VIEW_MODES: Tuple[str, ...] = ("images", "breeds")
LIMIT_OPTIONS: Tuple[int, ...] = (6, 12, 20, 30)
DEFAULT_LIMIT = 12
MIN_QUERY_LENGTH = 2


def _text(payload: Mapping[str, Any], key: str) -> Optional[str]:
    value = payload.get(key)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class Breed:
    """Breed metadata record as returned by ``/breeds`` and embedded in images."""

    id: BreedId
    name: str
    temperament: Optional[str] = None
    life_span: Optional[str] = None
    weight_metric: Optional[str] = None
    """Metric weight range in kilograms, e.g. ``"3 - 6"``."""
    weight_imperial: Optional[str] = None
    wikipedia_url: Optional[str] = None
    bred_for: Optional[str] = None
    breed_group: Optional[str] = None
    origin: Optional[str] = None
    image_url: Optional[str] = None
    """URL of the breed's reference image when the payload embeds one."""

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Breed":
        """Build a breed from a raw API mapping.

        Raises:
            ValueError: If the payload has no ``id`` or no usable ``name``.
        """
        if not isinstance(payload, Mapping):
            raise ValueError("Breed payload must be a mapping.")
        breed_id = payload.get("id")
        if breed_id is None or breed_id == "":
            raise ValueError("Breed payload is missing 'id'.")
        name = _text(payload, "name")
        if not name:
            raise ValueError(f"Breed {breed_id!r} is missing 'name'.")

        weight = payload.get("weight")
        weight_map: Mapping[str, Any] = weight if isinstance(weight, Mapping) else {}
        image = payload.get("image")
        image_map: Mapping[str, Any] = image if isinstance(image, Mapping) else {}

        return cls(
            id=breed_id,
            name=name,
            temperament=_text(payload, "temperament"),
            life_span=_text(payload, "life_span"),
            weight_metric=_text(weight_map, "metric"),
            weight_imperial=_text(weight_map, "imperial"),
            wikipedia_url=_text(payload, "wikipedia_url"),
            bred_for=_text(payload, "bred_for"),
            breed_group=_text(payload, "breed_group"),
            origin=_text(payload, "origin"),
            image_url=_text(image_map, "url"),
        )


def parse_breeds(raw: Any) -> Tuple[Breed, ...]:
    """Parse a list of breed payloads, skipping entries that are not usable."""
    if not isinstance(raw, list):
        return ()
    breeds = []
    for entry in raw:
        try:
            breeds.append(Breed.from_payload(entry))
        except ValueError:
            continue
    return tuple(breeds)


@dataclass(frozen=True)
class ImageResult:
    """One image record with the breeds attached to it (possibly none)."""

    id: str
    url: str
    breeds: Tuple[Breed, ...] = field(default_factory=tuple)

    @property
    def primary_breed(self) -> Optional[Breed]:
        return self.breeds[0] if self.breeds else None

    def with_breeds(self, breeds: Iterable[Breed]) -> "ImageResult":
        return replace(self, breeds=tuple(breeds))

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ImageResult":
        if not isinstance(payload, Mapping):
            raise ValueError("Image payload must be a mapping.")
        image_id = _text(payload, "id")
        if not image_id:
            raise ValueError("Image payload is missing 'id'.")
        return cls(
            id=image_id,
            url=_text(payload, "url") or "",
            breeds=parse_breeds(payload.get("breeds")),
        )


@dataclass(frozen=True)
class UIState:
    """Gallery UI state persisted as an opaque preference blob.

    Instances are immutable; handlers derive new snapshots with
    :func:`dataclasses.replace` via the ``with_*`` helpers.
    """

    limit: int = DEFAULT_LIMIT
    query: str = ""
    view: ViewMode = "images"

    def with_limit(self, limit: int) -> "UIState":
        if isinstance(limit, bool) or limit not in LIMIT_OPTIONS:
            raise ValueError(f"limit must be one of {LIMIT_OPTIONS}, got {limit!r}")
        return replace(self, limit=limit)

    def with_query(self, query: str) -> "UIState":
        return replace(self, query=str(query or "").strip())

    def with_view(self, view: str) -> "UIState":
        if view not in VIEW_MODES:
            raise ValueError(f"view must be one of {VIEW_MODES}, got {view!r}")
        return replace(self, view=view)  # type: ignore[arg-type]

    def to_payload(self) -> Dict[str, Any]:
        return {"limit": self.limit, "view": self.view, "query": self.query}

    @classmethod
    def from_payload(cls, payload: Any) -> "UIState":
        """Restore state field by field; invalid or missing fields use defaults."""
        defaults = cls()
        if not isinstance(payload, Mapping):
            return defaults

        limit = payload.get("limit")
        if isinstance(limit, bool) or limit not in LIMIT_OPTIONS:
            limit = defaults.limit
        limit = int(limit)

        view = payload.get("view")
        if view not in VIEW_MODES:
            view = defaults.view

        query = payload.get("query")
        if isinstance(query, str):
            query = query.strip()
            if 0 < len(query) < MIN_QUERY_LENGTH:
                query = defaults.query
        else:
            query = defaults.query

        return cls(limit=limit, query=query, view=view)


__all__ = [
    "Breed",
    "BreedId",
    "DEFAULT_LIMIT",
    "ImageResult",
    "LIMIT_OPTIONS",
    "MIN_QUERY_LENGTH",
    "UIState",
    "VIEW_MODES",
    "ViewMode",
    "parse_breeds",
]
