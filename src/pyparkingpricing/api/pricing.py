"""Lot pricing and advanced pricing endpoints."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from ..exceptions import ApiError, NotFoundError, PyParkingPricingError, ValidationError
from ..models import LotPricing
from ..util import coerce_decimal, format_decimal
from .base import BaseApi
from .const import (
    ADVANCED_PRICING_DELETE_ENDPOINT,
    ADVANCED_PRICING_ENDPOINT,
    ADVANCED_PRICING_UPDATE_ENDPOINT,
    ADVANCED_SETTINGS_STATE_ENDPOINT,
    LATEST_PRICING_ENDPOINT,
    UPSERT_PRICING_ENDPOINT,
)

_LOGGER = logging.getLogger(__name__)


class LotPricingApi(BaseApi):
    """Client for the ``lotpricing`` and ``lotadvancedpricing`` endpoints."""

    async def get_latest_pricing(self, lot_id: str) -> LotPricing | None:
        """Return the lot's general pricing, or ``None`` when none exists."""
        path = self._lot_path(LATEST_PRICING_ENDPOINT, lot_id)
        _LOGGER.debug("Lot %s get_latest_pricing started", lot_id)
        try:
            data = await self._request_json("GET", path)
        except NotFoundError:
            return None
        if data is None:
            return None
        return self._map_pricing(data, lot_id)

    async def update_or_create_pricing(self, pricing: LotPricing) -> LotPricing:
        path = self._lot_path(UPSERT_PRICING_ENDPOINT, pricing.lot_id)
        data = await self._request_json("PUT", path, json=self._pricing_payload(pricing))
        _LOGGER.debug("Lot %s pricing updated", pricing.lot_id)
        if data is None:
            return pricing
        return self._map_pricing(data, pricing.lot_id)

    async def get_advanced_pricing(self, lot_id: str) -> list[dict[str, Any]]:
        """Return every stored advanced pricing block of a lot."""
        path = self._lot_path(ADVANCED_PRICING_ENDPOINT, lot_id)
        try:
            data = await self._request_json("GET", path)
        except NotFoundError:
            return []
        return self._expect_record_list(data)

    async def update_advanced_pricing(
        self,
        lot_id: str,
        records: list[dict[str, Any]],
    ) -> list[dict[str, Any]]:
        """Replace all advanced pricing blocks of a lot in one call."""
        if not isinstance(records, list):
            raise ValidationError("records must be a list.")
        path = self._lot_path(ADVANCED_PRICING_UPDATE_ENDPOINT, lot_id)
        _LOGGER.debug("Lot %s update_advanced_pricing with %d block(s)", lot_id, len(records))
        data = await self._request_json("PUT", path, json=records)
        if data is None:
            return list(records)
        return self._expect_record_list(data)

    async def delete_all_advanced_pricing(self, lot_id: str) -> None:
        path = self._lot_path(ADVANCED_PRICING_DELETE_ENDPOINT, lot_id)
        await self._request_none("DELETE", path)
        _LOGGER.debug("Lot %s advanced pricing deleted", lot_id)

    async def get_advanced_settings_state(self, lot_id: str) -> bool:
        """Return whether advanced pricing is enabled; any failure reads as disabled."""
        path = self._lot_path(ADVANCED_SETTINGS_STATE_ENDPOINT, lot_id)
        try:
            data = await self._request_json("GET", path)
        except PyParkingPricingError as exc:
            _LOGGER.warning(
                "Could not read advanced settings state for lot %s: %s",
                lot_id,
                exc.__class__.__name__,
            )
            return False
        return isinstance(data, Mapping) and data.get("enabled") is True

    async def set_advanced_settings_state(self, lot_id: str, enabled: bool) -> bool:
        if not isinstance(enabled, bool):
            raise ValidationError("enabled must be a boolean.")
        path = self._lot_path(ADVANCED_SETTINGS_STATE_ENDPOINT, lot_id)
        data = await self._request_json("PUT", path, json={"enabled": enabled})
        if not isinstance(data, Mapping) or not isinstance(data.get("enabled"), bool):
            raise ApiError("Backend did not return the advanced settings state.")
        return data["enabled"]

    def _lot_path(self, template: str, lot_id: str) -> str:
        if not isinstance(lot_id, str) or not lot_id.strip():
            raise ValidationError("lot_id must be a non-empty string.")
        return template.format(lot_id=quote(lot_id.strip(), safe=""))

    def _expect_record_list(self, data: Any) -> list[dict[str, Any]]:
        if data is None:
            return []
        if not isinstance(data, list):
            raise ApiError("Backend returned invalid advanced pricing data.")
        return [item for item in data if isinstance(item, dict)]

    def _map_pricing(self, data: Any, lot_id: str) -> LotPricing:
        if not isinstance(data, Mapping):
            raise ApiError("Backend returned invalid pricing data.")
        returned_id = data.get("lotId")
        return LotPricing(
            lot_id=str(returned_id) if returned_id else lot_id,
            hourly_rate=coerce_decimal(data.get("hourlyRate"), None),
            maximum_amount=coerce_decimal(data.get("maximumAmount"), None),
            grace_period=self._parse_optional_int(data.get("gracePeriod")),
            maximum_time=self._parse_optional_int(data.get("maximumTime")),
            ticket_amount=coerce_decimal(data.get("ticketAmount"), None),
            free_parking=data.get("freeParking") is True,
            allow_validation=data.get("allowValidation") is True,
            available_slots=self._parse_optional_int(data.get("availableSlots")) or 0,
        )

    def _pricing_payload(self, pricing: LotPricing) -> dict[str, Any]:
        return {
            "lotId": pricing.lot_id,
            "hourlyRate": format_decimal(pricing.hourly_rate),
            "maximumAmount": format_decimal(pricing.maximum_amount),
            "gracePeriod": pricing.grace_period,
            "maximumTime": pricing.maximum_time,
            "ticketAmount": format_decimal(pricing.ticket_amount),
            "freeParking": pricing.free_parking,
            "allowValidation": pricing.allow_validation,
            "availableSlots": pricing.available_slots,
        }

    def _parse_optional_int(self, value: Any) -> int | None:
        if value is None or value == "" or isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return int(value)
        if isinstance(value, str) and value.strip().isdigit():
            return int(value.strip())
        return None
