"""Shared utilities for validation and normalization."""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

from .exceptions import ValidationError

_DECIMAL_TEXT_RE = re.compile(r"[^0-9.]")

MINUTES_PER_DAY = 1440
FULL_DAY_START = "00:00"
FULL_DAY_END = "23:59"


def sanitize_decimal_text(text: str) -> str:
    if not isinstance(text, str):
        raise ValidationError("Numeric input must be a string.")
    return _DECIMAL_TEXT_RE.sub("", text)


def parse_decimal(value: str | int | float | Decimal | None) -> Decimal | None:
    """Turn user input into a price, stripping anything but digits and dots."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValidationError("Price must be a number.")
    if isinstance(value, (int, float, Decimal)):
        parsed = Decimal(str(value))
        if not parsed.is_finite():
            raise ValidationError("Price must be a finite number.")
        return parsed
    cleaned = sanitize_decimal_text(value)
    if not cleaned:
        return None
    try:
        return Decimal(cleaned)
    except InvalidOperation as exc:
        raise ValidationError("Price is not a valid number.") from exc


def coerce_decimal(value: object, fallback: Decimal | None) -> Decimal | None:
    if value is None or value == "" or isinstance(value, bool):
        return fallback
    if not isinstance(value, (str, int, float, Decimal)):
        return fallback
    try:
        parsed = parse_decimal(value)
    except ValidationError:
        return fallback
    if parsed is None or not parsed.is_finite():
        return fallback
    return parsed


def format_decimal(value: Decimal | None) -> int | float | None:
    if value is None:
        return None
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def parse_time_of_day(value: str | None) -> int | None:
    """Parse ``HH:MM`` into minutes since midnight.

    Blank input yields ``None``. Hours are clamped to 0-23 and minutes to
    0-59; a part that is not a number reads as 0, as does text without a
    colon.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError("Time of day must be a string.")
    raw = value.strip()
    if not raw:
        return None
    if ":" not in raw:
        return 0
    hours_raw, minutes_raw = raw.split(":", 1)
    hours = _clamped_int(hours_raw, 23)
    minutes = _clamped_int(minutes_raw[:2], 59)
    return hours * 60 + minutes


def _clamped_int(raw: str, upper: int) -> int:
    try:
        parsed = int(raw)
    except ValueError:
        return 0
    return min(max(parsed, 0), upper)


def format_time_of_day(minutes: int) -> str:
    if isinstance(minutes, bool) or not isinstance(minutes, int):
        raise ValidationError("Time of day must be an integer number of minutes.")
    if not 0 <= minutes < MINUTES_PER_DAY:
        raise ValidationError("Time of day must be between 00:00 and 23:59.")
    return f"{minutes // 60:02d}:{minutes % 60:02d}"
