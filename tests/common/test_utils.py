import pytest
from datetime import date, datetime
from adtraffic.common.exceptions import InvalidArgumentError
from adtraffic.common.utils import (
    round_half_up, parse_iso_date, validate_volume, validate_asset_id, iter_dates
)

@pytest.mark.parametrize("value,expected", [
    (2.5, 3), (3.5, 4), (2.4999, 2), (0.5, 1), (-0.5, 0), (-1.5, -1), (249997.5, 249998),
])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected

def test_parse_iso_date():
    assert parse_iso_date("2025-06-16") == date(2025, 6, 16)
    assert parse_iso_date(" 2025-06-16 ") == date(2025, 6, 16)
    assert parse_iso_date(date(2025, 6, 16)) == date(2025, 6, 16)
    assert parse_iso_date(datetime(2025, 6, 16, 23, 59)) == date(2025, 6, 16)

@pytest.mark.parametrize("value", ["2025-6-161", "2025-02-30", "yesterday", None, 3.5])
def test_parse_iso_date_rejects_malformed(value):
    with pytest.raises(InvalidArgumentError):
        parse_iso_date(value)

def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        validate_volume(-1)

def test_validate_volume_accepts_zero_and_floats():
    assert validate_volume(0) == 0
    assert validate_volume(1234.5) == 1234.5

def test_validate_volume_rejects_bool():
    with pytest.raises(InvalidArgumentError):
        validate_volume(True)

def test_validate_asset_id():
    assert validate_asset_id("BB-001") == "BB-001"
    with pytest.raises(InvalidArgumentError):
        validate_asset_id("   ")

def test_iter_dates():
    assert list(iter_dates(date(2025, 12, 30), date(2026, 1, 2))) == [
        date(2025, 12, 30), date(2025, 12, 31), date(2026, 1, 1), date(2026, 1, 2)
    ]
    assert list(iter_dates(date(2025, 1, 2), date(2025, 1, 1))) == []
