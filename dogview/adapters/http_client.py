"""Shared HTTP transport utilities for REST adapters.

This module provides a thin wrapper around ``requests.Session`` so adapter
implementations share timeout policy and API-key header construction.

Dependencies:
    - ``requests`` for network I/O.
    - ``dogview.adapters.api_errors`` for typed transport failures.

Call context:
    - Constructed by ``dogview/adapters/dog_api_rest.py``.
    - Used only inside adapter methods; use cases interact through ports.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from requests import exceptions as req_exc

from dogview.adapters.api_errors import ApiError, ApiTimeoutError

API_KEY_HEADER = "x-api-key"


@dataclass
class HttpConfig:
    """Timeout configuration for adapter HTTP calls.

    Attributes:
        request_timeout_s: Timeout in seconds for JSON API calls.
    """
    request_timeout_s: float = 10


class ApiSession:
    """Shared requests wrapper with an optional API-key header.

    Each call is a single attempt. Failed loads are retried by the user, not
    by the transport. Callers provide endpoint URLs and decide how to map
    non-2xx responses into errors.
    """

    def __init__(self, api_key: Optional[str], cfg: HttpConfig) -> None:
        """Create a session.

        Args:
            api_key: Value for the ``x-api-key`` header, or ``None``.
            cfg: Shared timeout settings.

        Side Effects:
            Creates a persistent ``requests.Session`` object.
        """
        self.session = requests.Session()
        self.api_key = api_key
        self.cfg = cfg

    def _headers(self, accept: str = "application/json") -> Dict[str, str]:
        headers = {"Accept": accept}
        if self.api_key:
            headers[API_KEY_HEADER] = self.api_key
        return headers

    def get(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        accept: str = "application/json",
        timeout: Optional[float] = None,
    ) -> requests.Response:
        """Send one GET request.

        Args:
            url: Absolute endpoint URL.
            params: Optional query parameter mapping.
            accept: ``Accept`` header value.
            timeout: Optional timeout override in seconds.

        Returns:
            ``requests.Response`` whatever its status code.

        Raises:
            ApiTimeoutError: On timeout or connection failure.
            ApiError: On any other ``requests`` failure.
        """
        context = f"GET {url}"
        try:
            return self.session.get(
                url,
                params=params,
                headers=self._headers(accept=accept),
                timeout=timeout or self.cfg.request_timeout_s,
            )
        except (req_exc.Timeout, req_exc.ConnectionError) as exc:
            raise ApiTimeoutError(f"Timeout contacting {url}", context=context) from exc
        except req_exc.RequestException as exc:
            raise ApiError(str(exc), context=context) from exc

    def close(self) -> None:
        self.session.close()


__all__ = ["API_KEY_HEADER", "ApiSession", "HttpConfig"]
