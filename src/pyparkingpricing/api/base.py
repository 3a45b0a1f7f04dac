"""Shared HTTP behavior for pricing backend clients."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from ..exceptions import ApiError, AuthError, NetworkError, NotFoundError, ValidationError
from .const import AUTH_HEADER, AUTH_PREFIX, DEFAULT_HEADERS

_LOGGER = logging.getLogger(__name__)
_DEFAULT_TIMEOUT = aiohttp.ClientTimeout(total=30)


class BaseApi:
    """Base class for backend API wrappers."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        *,
        base_url: str | None = None,
        api_uri: str | None = None,
        token: str | None = None,
        timeout: aiohttp.ClientTimeout | None = None,
        retry_count: int = 0,
    ) -> None:
        if session is None:
            raise ValidationError("Session is required.")
        self._session = session
        self._base_url = self._normalize_base_url(base_url)
        self._api_uri = self._normalize_api_uri(api_uri)
        self._token = token or None
        self._timeout = timeout or _DEFAULT_TIMEOUT
        self._retry_count = max(0, retry_count)

    def _build_url(self, path: str) -> str:
        if not isinstance(path, str) or not path:
            raise ValidationError("Path must be a non-empty string.")
        if path.startswith("http://") or path.startswith("https://"):
            raise ValidationError("Use relative paths when building backend requests.")
        if self._base_url is None:
            raise ValidationError("base_url is required to build backend requests.")
        normalized_path = path if path.startswith("/") else f"/{path}"
        return f"{self._base_url}{self._api_uri}{normalized_path}"

    def _build_headers(self) -> dict[str, str]:
        headers = dict(DEFAULT_HEADERS)
        if self._token:
            headers[AUTH_HEADER] = f"{AUTH_PREFIX}{self._token}"
        return headers

    async def _request_json(self, method: str, path: str, **kwargs: Any) -> Any:
        url = self._build_url(path)
        return await self._request(method, url, expect_json=True, **kwargs)

    async def _request_none(self, method: str, path: str, **kwargs: Any) -> None:
        url = self._build_url(path)
        await self._request(method, url, expect_json=False, **kwargs)

    async def _request(self, method: str, url: str, *, expect_json: bool, **kwargs: Any) -> Any:
        retries = self._retry_count if method.upper() == "GET" else 0
        attempts = retries + 1
        timeout = kwargs.pop("timeout", None) or self._timeout
        headers = self._build_headers()
        headers.update(kwargs.pop("headers", None) or {})
        for attempt in range(attempts):
            _LOGGER.debug("%s %s attempt %d/%d", method, url, attempt + 1, attempts)
            try:
                async with self._session.request(
                    method,
                    url,
                    headers=headers,
                    timeout=timeout,
                    **kwargs,
                ) as response:
                    self._raise_for_status(response)
                    if not expect_json:
                        return None
                    try:
                        return await response.json()
                    except (aiohttp.ContentTypeError, ValueError) as exc:
                        raise ApiError("Response did not contain valid JSON.") from exc
            except (aiohttp.ClientError, TimeoutError) as exc:
                if attempt >= attempts - 1:
                    raise NetworkError("Network request failed.") from exc
                _LOGGER.debug("Retrying %s %s after %s", method, url, exc.__class__.__name__)

    def _raise_for_status(self, response: aiohttp.ClientResponse) -> None:
        if 200 <= response.status < 300:
            return
        if response.status in (401, 403):
            raise AuthError("Authentication failed.")
        if response.status == 404:
            raise NotFoundError("Backend has no record for this request.")
        raise ApiError(f"Backend request failed with status {response.status}.")

    def _normalize_base_url(self, base_url: str | None) -> str | None:
        if base_url is None:
            return None
        if not isinstance(base_url, str) or not base_url.strip():
            raise ValidationError("base_url must be a non-empty string.")
        return base_url.strip().rstrip("/")

    def _normalize_api_uri(self, api_uri: str | None) -> str:
        if api_uri is None:
            return ""
        if not isinstance(api_uri, str):
            raise ValidationError("api_uri must be a string.")
        normalized = api_uri.strip().strip("/")
        if not normalized:
            return ""
        return f"/{normalized}"
