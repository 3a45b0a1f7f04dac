"""Client facade for the pricing backend."""

from __future__ import annotations

import aiohttp

from .api.pricing import LotPricingApi
from .editor import AdvancedPricingEditor

_DEFAULT_TIMEOUT = aiohttp.ClientTimeout(total=30)


class Client:
    """Facade that shares one session between backend API wrappers."""

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        *,
        base_url: str | None = None,
        api_uri: str | None = None,
        token: str | None = None,
        timeout: aiohttp.ClientTimeout | None = None,
        retry_count: int = 0,
    ) -> None:
        self._session = session
        self._owns_session = session is None
        self._base_url = base_url
        self._api_uri = api_uri
        self._token = token
        self._timeout = timeout or _DEFAULT_TIMEOUT
        self._retry_count = max(0, retry_count)

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    def pricing_api(self, *, token: str | None = None) -> LotPricingApi:
        return LotPricingApi(
            self._ensure_session(),
            base_url=self._base_url,
            api_uri=self._api_uri,
            token=token if token is not None else self._token,
            timeout=self._timeout,
            retry_count=self._retry_count,
        )

    def advanced_editor(self, lot_id: str) -> AdvancedPricingEditor:
        return AdvancedPricingEditor(self.pricing_api(), lot_id)

    def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
        return self._session
