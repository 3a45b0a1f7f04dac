"""Day pricing block resolver.

A day is billed through exactly three ordered slots. Slot 0 holds the
primary rule, slot 1 an optional second time window and slot 2 whatever is
left over. Only ``allDay`` and ``setTime`` blocks are ever stored; every other
mode is rebuilt from them plus the lot's global hourly rate and daily cap.

Every function here is pure: the global rate and cap are passed in
explicitly and a new ``DaySchedule`` tuple is returned.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import replace
from decimal import Decimal
from typing import Any

from .exceptions import ValidationError
from .models import BlockMode, DaySchedule, DayScheduleBlock, PersistedBlock
from .util import (
    FULL_DAY_END,
    FULL_DAY_START,
    MINUTES_PER_DAY,
    coerce_decimal,
    format_time_of_day,
    parse_decimal,
    parse_time_of_day,
)

_LOGGER = logging.getLogger(__name__)

SLOT_COUNT = 3

MODE_LABELS: dict[BlockMode, str] = {
    BlockMode.DEFAULT: "Default",
    BlockMode.ALL_DAY: "All Day",
    BlockMode.SET_TIME: "Set Time",
    BlockMode.NEW_BLOCK: "New Time Block",
    BlockMode.NO_TIME: "No Remaining Time Available",
}

_PRIMARY_OPTIONS = (BlockMode.DEFAULT, BlockMode.ALL_DAY, BlockMode.SET_TIME)
_SECONDARY_OPTIONS = (BlockMode.DEFAULT, BlockMode.SET_TIME)

_NEW_BLOCK = DayScheduleBlock(mode=BlockMode.NEW_BLOCK)
_NO_TIME = DayScheduleBlock(mode=BlockMode.NO_TIME)


def _remainder(global_rate: Decimal | None, global_max: Decimal | None) -> DayScheduleBlock:
    return DayScheduleBlock(mode=BlockMode.DEFAULT, rate=global_rate, max_amount=global_max)


def default_day_schedule(
    global_rate: Decimal | None,
    global_max: Decimal | None,
) -> DaySchedule:
    return (_remainder(global_rate, global_max), _NEW_BLOCK, _NEW_BLOCK)


def mode_options(slot_index: int) -> tuple[BlockMode, ...]:
    """Return the modes a user may pick for a slot."""
    _validate_slot_index(slot_index)
    return _PRIMARY_OPTIONS if slot_index == 0 else _SECONDARY_OPTIONS


def _validate_slot_index(slot_index: int) -> None:
    if isinstance(slot_index, bool) or not isinstance(slot_index, int):
        raise ValidationError("slot_index must be an integer.")
    if not 0 <= slot_index < SLOT_COUNT:
        raise ValidationError(f"slot_index must be between 0 and {SLOT_COUNT - 1}.")


def infer_block_mode(entry: Mapping[str, Any]) -> BlockMode:
    """Guess the mode of a stored block that predates the ``blockMode`` field."""
    if entry.get("isDefault"):
        return BlockMode.DEFAULT
    start = entry.get("startTime")
    end = entry.get("endTime")
    if start and end:
        if start == FULL_DAY_START and end == FULL_DAY_END:
            return BlockMode.ALL_DAY
        return BlockMode.SET_TIME
    return BlockMode.DEFAULT


def _resolve_mode(entry: Mapping[str, Any]) -> BlockMode:
    raw = entry.get("blockMode")
    if raw:
        try:
            return BlockMode(raw)
        except ValueError:
            _LOGGER.warning("Unknown block mode %r, inferring from block fields", raw)
    return infer_block_mode(entry)


def _read_time(value: Any) -> int | None:
    if not isinstance(value, str):
        return None
    return parse_time_of_day(value)


def _parse_block(
    entry: Mapping[str, Any],
    global_rate: Decimal | None,
    global_max: Decimal | None,
) -> DayScheduleBlock:
    max_raw = entry.get("dailyMaximumPrice")
    if max_raw is None:
        max_raw = entry.get("maximumAmount")
    return DayScheduleBlock(
        mode=_resolve_mode(entry),
        start_time=_read_time(entry.get("startTime")),
        end_time=_read_time(entry.get("endTime")),
        rate=coerce_decimal(entry.get("hourlyRate"), global_rate),
        max_amount=coerce_decimal(max_raw, global_max),
    )


def parse_day_schedule(
    persisted_blocks: Iterable[Mapping[str, Any]] | None,
    global_rate: Decimal | None,
    global_max: Decimal | None,
) -> DaySchedule:
    """Rebuild a day's three slots from its stored blocks.

    Stored data is normalized, never rejected. Placeholder modes found in
    storage are dropped, and slots are reshaped so that a lower slot only
    survives while every slot above it is a ``setTime`` window. When the
    stored blocks are all ``setTime`` the next free slot becomes the default
    remainder so uncovered time is billed at the global rate.
    """
    blocks: list[DayScheduleBlock] = []
    for entry in persisted_blocks or ():
        if len(blocks) == SLOT_COUNT:
            break
        if not isinstance(entry, Mapping):
            _LOGGER.warning("Skipping stored pricing block that is not an object")
            continue
        block = _parse_block(entry, global_rate, global_max)
        if block.mode in (BlockMode.NEW_BLOCK, BlockMode.NO_TIME):
            continue
        blocks.append(block)

    if not blocks:
        return default_day_schedule(global_rate, global_max)

    first = blocks[0]
    if first.mode is not BlockMode.SET_TIME:
        if len(blocks) > 1:
            _LOGGER.warning("Dropping %d block(s) below a %s block", len(blocks) - 1, first.mode)
        return (first, _NEW_BLOCK, _NEW_BLOCK)

    second = blocks[1] if len(blocks) > 1 else None
    if second is None or second.mode is not BlockMode.SET_TIME:
        if second is not None and second.mode is BlockMode.DEFAULT:
            return (first, second, _NEW_BLOCK)
        return (first, _remainder(global_rate, global_max), _NEW_BLOCK)

    third = blocks[2] if len(blocks) > 2 else None
    if third is not None and third.mode in (BlockMode.DEFAULT, BlockMode.SET_TIME):
        return (first, second, third)
    return (first, second, _remainder(global_rate, global_max))


def apply_mode_change(
    schedule: DaySchedule,
    slot_index: int,
    new_mode: BlockMode,
    global_rate: Decimal | None,
    global_max: Decimal | None,
) -> DaySchedule:
    """Switch one slot to a new mode and reset the slots below it."""
    _validate_slot_index(slot_index)
    try:
        new_mode = BlockMode(new_mode)
    except ValueError as exc:
        raise ValidationError(f"Unknown block mode {new_mode!r}.") from exc
    if new_mode not in mode_options(slot_index):
        raise ValidationError(f"Mode {new_mode} is not available for slot {slot_index}.")
    current = schedule[slot_index].mode
    if current in (BlockMode.NEW_BLOCK, BlockMode.NO_TIME):
        raise ValidationError(f"Slot {slot_index} holds a {current} block and cannot be edited.")

    blocks = list(schedule)
    blocks[slot_index] = replace(blocks[slot_index], mode=new_mode)
    if slot_index == 0:
        if new_mode is BlockMode.SET_TIME:
            blocks[1] = _remainder(global_rate, global_max)
            blocks[2] = _NEW_BLOCK
        else:
            blocks[1] = _NEW_BLOCK
            blocks[2] = _NEW_BLOCK
    elif slot_index == 1:
        if new_mode is BlockMode.SET_TIME:
            blocks[2] = _remainder(global_rate, global_max)
        else:
            blocks[2] = _NEW_BLOCK
    return (blocks[0], blocks[1], blocks[2])


def block_duration(block: DayScheduleBlock) -> int:
    """Minutes covered by a block, wrapping past midnight; blank times read as 00:00."""
    start = block.start_time or 0
    end = block.end_time or 0
    return (end - start + MINUTES_PER_DAY) % MINUTES_PER_DAY


def is_fully_covered(schedule: DaySchedule) -> bool:
    top, middle, _ = schedule
    if top.mode is not BlockMode.SET_TIME or middle.mode is not BlockMode.SET_TIME:
        return False
    return block_duration(top) + block_duration(middle) == MINUTES_PER_DAY


def adjust_coverage(
    schedule: DaySchedule,
    global_rate: Decimal | None,
    global_max: Decimal | None,
) -> DaySchedule:
    """Keep slot 2 consistent with how much of the day slots 0 and 1 cover."""
    top, middle, bottom = schedule
    if is_fully_covered(schedule):
        if bottom.mode is BlockMode.NO_TIME:
            return schedule
        return (top, middle, _NO_TIME)
    if bottom.mode is BlockMode.NO_TIME:
        return (top, middle, _remainder(global_rate, global_max))
    return schedule


def set_block_times(
    schedule: DaySchedule,
    slot_index: int,
    start_time: str | None,
    end_time: str | None,
) -> DaySchedule:
    _validate_slot_index(slot_index)
    block = schedule[slot_index]
    if block.mode is not BlockMode.SET_TIME:
        raise ValidationError("Times can only be set on a setTime block.")
    updated = replace(
        block,
        start_time=parse_time_of_day(start_time),
        end_time=parse_time_of_day(end_time),
    )
    return _with_block(schedule, slot_index, updated)


def set_block_rate(schedule: DaySchedule, slot_index: int, text: str) -> DaySchedule:
    block = _editable_price_block(schedule, slot_index)
    return _with_block(schedule, slot_index, replace(block, rate=parse_decimal(text)))


def set_block_max_amount(schedule: DaySchedule, slot_index: int, text: str) -> DaySchedule:
    block = _editable_price_block(schedule, slot_index)
    return _with_block(schedule, slot_index, replace(block, max_amount=parse_decimal(text)))


def _editable_price_block(schedule: DaySchedule, slot_index: int) -> DayScheduleBlock:
    _validate_slot_index(slot_index)
    block = schedule[slot_index]
    # Default blocks always bill at the lot's global values.
    if block.mode not in (BlockMode.ALL_DAY, BlockMode.SET_TIME):
        raise ValidationError(f"Prices cannot be edited on a {block.mode} block.")
    return block


def _with_block(schedule: DaySchedule, slot_index: int, block: DayScheduleBlock) -> DaySchedule:
    blocks = list(schedule)
    blocks[slot_index] = block
    return (blocks[0], blocks[1], blocks[2])


def build_persistable_blocks(
    schedule: DaySchedule,
    global_rate: Decimal | None,
    global_max: Decimal | None,
) -> list[PersistedBlock]:
    persisted: list[PersistedBlock] = []
    for block in schedule:
        if block.mode is BlockMode.ALL_DAY:
            start, end = FULL_DAY_START, FULL_DAY_END
        elif block.mode is BlockMode.SET_TIME:
            start = (
                format_time_of_day(block.start_time)
                if block.start_time is not None
                else FULL_DAY_START
            )
            end = format_time_of_day(block.end_time) if block.end_time is not None else FULL_DAY_END
        else:
            continue
        persisted.append(
            PersistedBlock(
                block_mode=block.mode,
                start_time=start,
                end_time=end,
                hourly_rate=block.rate if block.rate is not None else global_rate,
                daily_maximum_price=(
                    block.max_amount if block.max_amount is not None else global_max
                ),
            )
        )
    return persisted
