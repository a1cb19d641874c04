from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

from ..core.constants import DEFAULT_API_TIMEOUT
from ..core.exceptions import ApiError, AuthenticationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApiConfig:
    base_url: str
    timeout: float = DEFAULT_API_TIMEOUT


class ApiClient:
    """Thin wrapper over ``requests.Session`` bound to one bearer token.

    The token is passed in explicitly per request scope; nothing here reads
    ambient storage. Every response is expected to follow the backend
    envelope ``{"success": bool, "message"?: str, ...}``.
    """

    def __init__(self, config: ApiConfig, token: str, *, session: Optional[requests.Session] = None):
        if not token:
            raise AuthenticationError("Avtorizatsiya tokeni topilmadi")
        self._config = config
        self._token = token
        self._session = session or requests.Session()

    @property
    def base_url(self) -> str:
        return self._config.base_url.rstrip("/")

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _headers(self) -> dict:
        return {"Authorization": f"Bearer {self._token}"}

    def get(self, path: str, **kwargs: Any) -> dict:
        return self._request("GET", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> dict:
        return self._request("POST", path, **kwargs)

    def put(self, path: str, **kwargs: Any) -> dict:
        return self._request("PUT", path, **kwargs)

    def _request(self, method: str, path: str, **kwargs: Any) -> dict:
        url = self._url(path)
        headers = {**self._headers(), **kwargs.pop("headers", {})}
        try:
            resp = self._session.request(method, url, headers=headers, timeout=self._config.timeout, **kwargs)
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise ApiError("Server bilan bog'lanib bo'lmadi") from exc

        payload = self._json(resp)
        if resp.status_code >= 400:
            message = payload.get("message") or "Server xatosi"
            logger.warning("%s %s -> %s: %s", method, url, resp.status_code, message)
            raise ApiError(message, status_code=resp.status_code)

        if not payload.get("success"):
            message = payload.get("message") or "Xatolik yuz berdi"
            logger.info("%s %s -> success=false: %s", method, url, message)
            raise ApiError(message, status_code=resp.status_code)

        logger.debug("%s %s -> %s", method, url, resp.status_code)
        return payload

    @staticmethod
    def _json(resp: requests.Response) -> dict:
        try:
            data = resp.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}
