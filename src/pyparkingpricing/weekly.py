"""Weekly schedule helpers built on the day resolver."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any

from .models import PERSISTED_MODES, DayOfWeek, DaySchedule, WeeklySchedule
from .resolver import (
    adjust_coverage,
    build_persistable_blocks,
    default_day_schedule,
    parse_day_schedule,
)

_LOGGER = logging.getLogger(__name__)

# Keys of the lot document that keeps one array per day.
LOT_DAY_PRICING_KEYS: dict[DayOfWeek, str] = {
    day: f"{day.value.lower()}Pricing" for day in DayOfWeek
}


def parse_day_of_week(value: Any) -> DayOfWeek | None:
    if not isinstance(value, str):
        return None
    try:
        return DayOfWeek(value.strip().upper())
    except ValueError:
        return None


def default_weekly_schedule(
    global_rate: Decimal | None,
    global_max: Decimal | None,
) -> dict[DayOfWeek, DaySchedule]:
    return {day: default_day_schedule(global_rate, global_max) for day in DayOfWeek}


def parse_weekly_schedule(
    records: Iterable[Mapping[str, Any]] | None,
    global_rate: Decimal | None,
    global_max: Decimal | None,
) -> dict[DayOfWeek, DaySchedule]:
    """Group the flat advanced pricing list by day and parse each day."""
    grouped: dict[DayOfWeek, list[Mapping[str, Any]]] = {day: [] for day in DayOfWeek}
    for record in records or ():
        if not isinstance(record, Mapping):
            _LOGGER.warning("Skipping advanced pricing record that is not an object")
            continue
        day = parse_day_of_week(record.get("dayOfWeek"))
        if day is None:
            _LOGGER.warning(
                "Skipping advanced pricing record with unknown day %r",
                record.get("dayOfWeek"),
            )
            continue
        grouped[day].append(record)
    return {
        day: parse_day_schedule(entries, global_rate, global_max)
        for day, entries in grouped.items()
    }


def parse_lot_day_pricing(
    pricing: Mapping[str, Any],
    global_rate: Decimal | None,
    global_max: Decimal | None,
) -> dict[DayOfWeek, DaySchedule]:
    """Parse a lot document that stores ``mondayPricing`` .. ``sundayPricing`` arrays."""
    schedule: dict[DayOfWeek, DaySchedule] = {}
    for day, key in LOT_DAY_PRICING_KEYS.items():
        entries = pricing.get(key)
        if entries is not None and not isinstance(entries, list):
            _LOGGER.warning("Ignoring %s, expected a list", key)
            entries = None
        schedule[day] = parse_day_schedule(entries, global_rate, global_max)
    return schedule


def adjust_weekly_coverage(
    weekly: WeeklySchedule,
    global_rate: Decimal | None,
    global_max: Decimal | None,
) -> dict[DayOfWeek, DaySchedule]:
    return {day: adjust_coverage(weekly[day], global_rate, global_max) for day in DayOfWeek}


def build_weekly_payload(
    weekly: WeeklySchedule,
    global_rate: Decimal | None,
    global_max: Decimal | None,
) -> list[dict[str, Any]]:
    payload: list[dict[str, Any]] = []
    for day in DayOfWeek:
        for block in build_persistable_blocks(weekly[day], global_rate, global_max):
            payload.append(block.to_payload(day))
    return payload


def has_advanced_blocks(weekly: WeeklySchedule) -> bool:
    return any(
        block.mode in PERSISTED_MODES for schedule in weekly.values() for block in schedule
    )
