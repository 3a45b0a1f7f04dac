from decimal import Decimal

from pyparkingpricing.models import BlockMode, DayOfWeek
from pyparkingpricing.resolver import default_day_schedule
from pyparkingpricing.weekly import (
    adjust_weekly_coverage,
    build_weekly_payload,
    default_weekly_schedule,
    has_advanced_blocks,
    parse_day_of_week,
    parse_lot_day_pricing,
    parse_weekly_schedule,
)

RATE = Decimal("3")
MAX = Decimal("25")

RECORDS = [
    {
        "dayOfWeek": "MONDAY",
        "blockMode": "setTime",
        "startTime": "07:00",
        "endTime": "19:00",
        "hourlyRate": 4,
        "dailyMaximumPrice": 30,
    },
    {
        "dayOfWeek": "tuesday",
        "blockMode": "allDay",
        "startTime": "00:00",
        "endTime": "23:59",
        "hourlyRate": 2,
        "dailyMaximumPrice": None,
    },
    {"dayOfWeek": "FUNDAY", "blockMode": "allDay"},
    {"blockMode": "allDay"},
]


def test_parse_day_of_week() -> None:
    assert parse_day_of_week(" sunday ") is DayOfWeek.SUNDAY
    assert parse_day_of_week("SUN") is None
    assert parse_day_of_week(None) is None
    assert DayOfWeek.WEDNESDAY.label == "Wednesday"


def test_default_weekly_schedule_covers_all_days() -> None:
    weekly = default_weekly_schedule(RATE, MAX)
    assert list(weekly) == list(DayOfWeek)
    assert not has_advanced_blocks(weekly)


def test_parse_weekly_schedule_groups_by_day() -> None:
    weekly = parse_weekly_schedule(RECORDS, RATE, MAX)
    assert [block.mode for block in weekly[DayOfWeek.MONDAY]] == [
        BlockMode.SET_TIME,
        BlockMode.DEFAULT,
        BlockMode.NEW_BLOCK,
    ]
    assert weekly[DayOfWeek.TUESDAY][0].mode is BlockMode.ALL_DAY
    assert weekly[DayOfWeek.TUESDAY][0].max_amount == MAX
    assert weekly[DayOfWeek.SUNDAY] == default_day_schedule(RATE, MAX)
    assert has_advanced_blocks(weekly)


def test_build_weekly_payload_orders_days() -> None:
    weekly = parse_weekly_schedule(list(reversed(RECORDS)), RATE, MAX)
    payload = build_weekly_payload(weekly, RATE, MAX)
    assert [record["dayOfWeek"] for record in payload] == ["MONDAY", "TUESDAY"]
    assert payload[0]["startTime"] == "07:00"
    assert payload[0]["dailyMaximumPrice"] == 30
    assert payload[1]["dailyMaximumPrice"] == 25


def test_parse_lot_day_pricing_reads_per_day_arrays() -> None:
    lot = {
        "lotId": "lot-1",
        "mondayPricing": [
            {"startTime": "00:00", "endTime": "12:00", "hourlyRate": "2"},
            {"startTime": "12:00", "endTime": "00:00", "hourlyRate": "4"},
        ],
        "fridayPricing": "not a list",
    }
    weekly = adjust_weekly_coverage(parse_lot_day_pricing(lot, RATE, MAX), RATE, MAX)
    assert [block.mode for block in weekly[DayOfWeek.MONDAY]] == [
        BlockMode.SET_TIME,
        BlockMode.SET_TIME,
        BlockMode.NO_TIME,
    ]
    assert weekly[DayOfWeek.FRIDAY] == default_day_schedule(RATE, MAX)
