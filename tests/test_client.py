import aiohttp
import pytest

from pyparkingpricing import Client
from pyparkingpricing.api.pricing import LotPricingApi
from pyparkingpricing.editor import AdvancedPricingEditor


@pytest.mark.asyncio
async def test_client_does_not_close_injected_session() -> None:
    session = aiohttp.ClientSession()
    client = Client(session=session)
    await client.aclose()

    assert session.closed is False
    await session.close()


@pytest.mark.asyncio
async def test_client_closes_own_session() -> None:
    async with Client(base_url="https://example.com") as client:
        api = client.pricing_api()
        session = client._session
    assert session is not None
    assert session.closed is True
    assert isinstance(api, LotPricingApi)


@pytest.mark.asyncio
async def test_pricing_api_uses_client_settings() -> None:
    async with Client(base_url="https://example.com/", api_uri="api", token="abc") as client:
        api = client.pricing_api()
        editor = client.advanced_editor("lot-1")

    assert api._build_url("/x") == "https://example.com/api/x"
    assert api._build_headers()["Authorization"] == "Bearer abc"
    assert isinstance(editor, AdvancedPricingEditor)
    assert editor.lot_id == "lot-1"
