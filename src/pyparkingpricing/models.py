"""Public data models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum
from typing import Any, TypeAlias

from .util import format_decimal


class BlockMode(StrEnum):
    DEFAULT = "default"
    ALL_DAY = "allDay"
    SET_TIME = "setTime"
    NEW_BLOCK = "newBlock"
    NO_TIME = "noTime"


PERSISTED_MODES = frozenset({BlockMode.ALL_DAY, BlockMode.SET_TIME})


class DayOfWeek(StrEnum):
    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True, slots=True)
class DayScheduleBlock:
    """One pricing rule within a day.

    Times are minutes since midnight and only carry meaning for
    ``BlockMode.SET_TIME``. ``None`` means the field was left blank.
    """

    mode: BlockMode
    start_time: int | None = None
    end_time: int | None = None
    rate: Decimal | None = None
    max_amount: Decimal | None = None


DaySchedule: TypeAlias = tuple[DayScheduleBlock, DayScheduleBlock, DayScheduleBlock]
WeeklySchedule: TypeAlias = Mapping[DayOfWeek, DaySchedule]


@dataclass(frozen=True, slots=True)
class PersistedBlock:
    block_mode: BlockMode
    start_time: str
    end_time: str
    hourly_rate: Decimal | None
    daily_maximum_price: Decimal | None

    def to_payload(self, day_of_week: DayOfWeek) -> dict[str, Any]:
        return {
            "dayOfWeek": day_of_week.value,
            "blockMode": self.block_mode.value,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "hourlyRate": format_decimal(self.hourly_rate),
            "dailyMaximumPrice": format_decimal(self.daily_maximum_price),
        }


@dataclass(frozen=True, slots=True)
class LotPricing:
    lot_id: str
    hourly_rate: Decimal | None = None
    maximum_amount: Decimal | None = None
    grace_period: int | None = None
    maximum_time: int | None = None
    ticket_amount: Decimal | None = None
    free_parking: bool = False
    allow_validation: bool = False
    available_slots: int = 0
