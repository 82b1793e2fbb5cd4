from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from dogview.domain.entities import Breed, BreedId, ImageResult, parse_breeds
from dogview.domain.ports import DEFAULT_API_BASE, DogApiPort

from .api_errors import (
    ApiClientError,
    ApiError,
    ApiServerError,
    build_error_message,
    extract_error_hint,
    parse_error_payload,
)
from .http_client import ApiSession, HttpConfig

log = logging.getLogger(__name__)


class DogApiRestAdapter(DogApiPort):
    """REST adapter for the image and breed endpoints of TheDogAPI."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE,
        *,
        api_key: Optional[str] = None,
        request_timeout_s: float = 10,
    ) -> None:
        base = str(base_url or "").strip()
        if not base:
            raise ValueError("DogApiRestAdapter requires a base URL")

        self.base_url = base.rstrip("/")
        self.cfg = HttpConfig(request_timeout_s=request_timeout_s)
        self.session = ApiSession(api_key or None, self.cfg)

    def search_images(
        self,
        *,
        limit: int,
        breed_id: Optional[BreedId] = None,
    ) -> List[ImageResult]:
        params: Dict[str, Any] = {}
        if breed_id is None:
            params["has_breeds"] = 1
            ctx = "images/search"
        else:
            params["breed_ids"] = breed_id
            ctx = f"images/search[breed={breed_id}]"
        params["include_breeds"] = 1
        params["limit"] = int(limit)

        resp = self.session.get(self._make_url("/images/search"), params=params)
        self._ensure_ok(resp, ctx)
        data = self._json_list(resp, ctx)
        log.debug("%s returned %d entries", ctx, len(data))
        return self._parse_images(data)

    def get_image(self, image_id: str) -> ImageResult:
        cleaned = str(image_id or "").strip()
        if not cleaned:
            raise ValueError("image_id must be a non-empty string.")
        ctx = f"images[{cleaned}]"
        resp = self.session.get(self._make_url(f"/images/{cleaned}"))
        self._ensure_ok(resp, ctx)
        data = self._json_any(resp, ctx)
        if not isinstance(data, dict):
            raise ApiError(f"{ctx}: expected object response", context=ctx)
        try:
            return ImageResult.from_payload(data)
        except ValueError as exc:
            raise ApiError(f"{ctx}: {exc}", context=ctx) from exc

    def search_breeds(self, query: str) -> List[Breed]:
        cleaned = str(query or "").strip()
        if not cleaned:
            raise ValueError("Breed search query must be non-empty.")
        ctx = "breeds/search"
        resp = self.session.get(self._make_url("/breeds/search"), params={"q": cleaned})
        self._ensure_ok(resp, ctx)
        return list(parse_breeds(self._json_list(resp, ctx)))

    def list_breeds(self) -> List[Breed]:
        ctx = "breeds"
        resp = self.session.get(self._make_url("/breeds"))
        self._ensure_ok(resp, ctx)
        return list(parse_breeds(self._json_list(resp, ctx)))

    def close(self) -> None:
        self.session.close()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _make_url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    @staticmethod
    def _parse_images(data: List[Any]) -> List[ImageResult]:
        images: List[ImageResult] = []
        for entry in data:
            try:
                images.append(ImageResult.from_payload(entry))
            except ValueError:
                log.debug("Skipping malformed image entry: %r", entry)
        return images

    @staticmethod
    def _ensure_ok(resp: requests.Response, ctx: str) -> None:
        if 200 <= resp.status_code < 300:
            return
        status = resp.status_code
        payload = parse_error_payload(resp)
        message = build_error_message(ctx, status, payload)
        if 400 <= status < 500:
            raise ApiClientError(
                message,
                status=status,
                hint=extract_error_hint(payload),
                payload=payload,
                context=ctx,
            )
        if 500 <= status < 600:
            raise ApiServerError(
                message,
                status=status,
                payload=payload,
                context=ctx,
            )
        raise ApiError(message, status=status, payload=payload, context=ctx)

    @staticmethod
    def _json_any(resp: requests.Response, ctx: str) -> Any:
        try:
            return resp.json()
        except Exception as exc:
            snippet = getattr(resp, "text", "")[:400]
            raise ApiError(f"{ctx}: invalid JSON response: {snippet}", context=ctx) from exc

    @classmethod
    def _json_list(cls, resp: requests.Response, ctx: str) -> List[Any]:
        data = cls._json_any(resp, ctx)
        if not isinstance(data, list):
            raise ApiError(f"{ctx}: expected list response", context=ctx)
        return data


__all__ = ["DEFAULT_API_BASE", "DogApiRestAdapter"]
