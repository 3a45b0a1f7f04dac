"""Editing session for a lot's advanced pricing."""

from __future__ import annotations

import logging
from decimal import Decimal

from .api.pricing import LotPricingApi
from .exceptions import ValidationError
from .models import BlockMode, DayOfWeek, DaySchedule
from .resolver import (
    adjust_coverage,
    apply_mode_change,
    set_block_max_amount,
    set_block_rate,
    set_block_times,
)
from .util import sanitize_decimal_text
from .weekly import (
    adjust_weekly_coverage,
    build_weekly_payload,
    default_weekly_schedule,
    has_advanced_blocks,
    parse_weekly_schedule,
)

_LOGGER = logging.getLogger(__name__)


class AdvancedPricingEditor:
    """Holds the seven day schedules of one lot between load and save.

    Edits only touch memory and mark the editor dirty. ``save`` and
    ``disable`` push the whole week in one go; if the backend call fails the
    exception propagates and the editor stays dirty so the caller can retry.
    """

    def __init__(
        self,
        api: LotPricingApi,
        lot_id: str,
        *,
        global_rate: Decimal | None = None,
        global_max: Decimal | None = None,
    ) -> None:
        if not isinstance(lot_id, str) or not lot_id.strip():
            raise ValidationError("lot_id must be a non-empty string.")
        self._api = api
        self._lot_id = lot_id.strip()
        self._global_rate = global_rate
        self._global_max = global_max
        self._schedule = default_weekly_schedule(global_rate, global_max)
        self._enabled = False
        self._dirty = False

    @property
    def lot_id(self) -> str:
        return self._lot_id

    @property
    def global_rate(self) -> Decimal | None:
        return self._global_rate

    @property
    def global_max(self) -> Decimal | None:
        return self._global_max

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def is_dirty(self) -> bool:
        return self._dirty

    def schedule(self, day: DayOfWeek) -> DaySchedule:
        return self._schedule[DayOfWeek(day)]

    def weekly_schedule(self) -> dict[DayOfWeek, DaySchedule]:
        return dict(self._schedule)

    async def load(self) -> None:
        _LOGGER.debug("Lot %s advanced pricing load started", self._lot_id)
        pricing = await self._api.get_latest_pricing(self._lot_id)
        if pricing is not None:
            self._global_rate = pricing.hourly_rate
            self._global_max = pricing.maximum_amount
        records = await self._api.get_advanced_pricing(self._lot_id)
        weekly = parse_weekly_schedule(records, self._global_rate, self._global_max)
        self._schedule = adjust_weekly_coverage(weekly, self._global_rate, self._global_max)
        state = await self._api.get_advanced_settings_state(self._lot_id)
        self._enabled = state or has_advanced_blocks(self._schedule)
        self._dirty = False
        _LOGGER.debug(
            "Lot %s advanced pricing load completed (enabled=%s)",
            self._lot_id,
            self._enabled,
        )

    def enable(self) -> None:
        if self._enabled:
            return
        self._enabled = True
        self._dirty = True

    def change_mode(self, day: DayOfWeek, slot_index: int, mode: BlockMode) -> DaySchedule:
        return self._edit(
            day,
            lambda schedule: apply_mode_change(
                schedule,
                slot_index,
                mode,
                self._global_rate,
                self._global_max,
            ),
        )

    def set_times(
        self,
        day: DayOfWeek,
        slot_index: int,
        start_time: str | None,
        end_time: str | None,
    ) -> DaySchedule:
        return self._edit(
            day,
            lambda schedule: set_block_times(schedule, slot_index, start_time, end_time),
        )

    def set_rate(self, day: DayOfWeek, slot_index: int, text: str) -> DaySchedule:
        cleaned = sanitize_decimal_text(text)
        return self._edit(day, lambda schedule: set_block_rate(schedule, slot_index, cleaned))

    def set_max_amount(self, day: DayOfWeek, slot_index: int, text: str) -> DaySchedule:
        cleaned = sanitize_decimal_text(text)
        return self._edit(
            day,
            lambda schedule: set_block_max_amount(schedule, slot_index, cleaned),
        )

    def _edit(self, day: DayOfWeek, change) -> DaySchedule:
        if not self._enabled:
            raise ValidationError("Enable advanced pricing before editing it.")
        key = DayOfWeek(day)
        updated = adjust_coverage(change(self._schedule[key]), self._global_rate, self._global_max)
        self._schedule[key] = updated
        self._dirty = True
        return updated

    def payload(self) -> list[dict]:
        return build_weekly_payload(self._schedule, self._global_rate, self._global_max)

    async def save(self) -> None:
        if not self._enabled:
            raise ValidationError("Advanced pricing is disabled; use disable() to clear it.")
        records = self.payload()
        _LOGGER.debug("Lot %s saving %d advanced pricing block(s)", self._lot_id, len(records))
        await self._api.update_advanced_pricing(self._lot_id, records)
        await self._api.set_advanced_settings_state(self._lot_id, True)
        self._dirty = False

    async def disable(self) -> None:
        """Turn advanced pricing off and discard every stored block."""
        self._schedule = default_weekly_schedule(self._global_rate, self._global_max)
        self._enabled = False
        self._dirty = True
        await self._api.delete_all_advanced_pricing(self._lot_id)
        await self._api.set_advanced_settings_state(self._lot_id, False)
        self._dirty = False
        _LOGGER.debug("Lot %s advanced pricing disabled", self._lot_id)
