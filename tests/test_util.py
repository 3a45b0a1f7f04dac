from decimal import Decimal

import pytest

from pyparkingpricing.exceptions import ValidationError
from pyparkingpricing.util import (
    coerce_decimal,
    format_decimal,
    format_time_of_day,
    parse_decimal,
    parse_time_of_day,
    sanitize_decimal_text,
)


def test_sanitize_decimal_text_strips_non_numeric() -> None:
    assert sanitize_decimal_text("$1,2a.5 ") == "12.5"
    assert sanitize_decimal_text("-3") == "3"


def test_parse_decimal() -> None:
    assert parse_decimal("4.75") == Decimal("4.75")
    assert parse_decimal(3) == Decimal("3")
    assert parse_decimal("abc") is None
    assert parse_decimal(None) is None


def test_parse_decimal_rejects_malformed_number() -> None:
    with pytest.raises(ValidationError):
        parse_decimal("1.2.3")
    with pytest.raises(ValidationError):
        parse_decimal(True)


def test_coerce_decimal_falls_back() -> None:
    fallback = Decimal("2")
    assert coerce_decimal("1.2.3", fallback) == fallback
    assert coerce_decimal("", fallback) == fallback
    assert coerce_decimal({"value": 1}, fallback) == fallback
    assert coerce_decimal("7", fallback) == Decimal("7")
    assert coerce_decimal(2.5, None) == Decimal("2.5")


def test_format_decimal() -> None:
    assert format_decimal(Decimal("5.00")) == 5
    assert isinstance(format_decimal(Decimal("5.00")), int)
    assert format_decimal(Decimal("2.5")) == 2.5
    assert format_decimal(None) is None


def test_parse_time_of_day() -> None:
    assert parse_time_of_day("08:30") == 510
    assert parse_time_of_day("25:70") == 1439
    assert parse_time_of_day("ab:10") == 10
    assert parse_time_of_day("0830") == 0
    assert parse_time_of_day("") is None
    assert parse_time_of_day(None) is None


def test_format_time_of_day() -> None:
    assert format_time_of_day(0) == "00:00"
    assert format_time_of_day(1439) == "23:59"
    with pytest.raises(ValidationError):
        format_time_of_day(1440)


def test_non_finite_numbers() -> None:
    fallback = Decimal("4")
    assert coerce_decimal(float("inf"), fallback) == fallback
    assert coerce_decimal(Decimal("Infinity"), fallback) == fallback
    assert coerce_decimal(float("nan"), None) is None
    with pytest.raises(ValidationError):
        parse_decimal(float("inf"))
