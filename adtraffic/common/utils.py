"""
Common utilities shared across all modules.
"""
import math
from datetime import date, datetime, timedelta
from typing import Iterator, Union
from .exceptions import InvalidArgumentError

DateLike = Union[date, datetime, str]

def round_half_up(value: float) -> int:
    """
    Rounds to the nearest integer with halves rounded up.
    Unlike round(), 2.5 -> 3 and 3.5 -> 4.
    """
    return int(math.floor(value + 0.5))

def parse_iso_date(value: DateLike, field_name: str = "date") -> date:
    """
    Normalizes a calendar date given as date, datetime or ISO string (YYYY-MM-DD).
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), "%Y-%m-%d").date()
        except ValueError as e:
            raise InvalidArgumentError(f"{field_name} must be an ISO date (YYYY-MM-DD), got '{value}'") from e
    raise InvalidArgumentError(f"{field_name} must be a date or ISO string, got {type(value).__name__}")

def validate_volume(value: float, field_name: str = "daily_base_volume") -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(f"{field_name} must be a number, got {type(value).__name__}")
    if math.isnan(value) or math.isinf(value):
        raise InvalidArgumentError(f"{field_name} must be finite, got {value}")
    if value < 0:
        raise InvalidArgumentError(f"{field_name} must be non-negative, got {value}")
    return value

def validate_asset_id(value: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError("asset_id must be a non-empty string")
    return value

def iter_dates(start: date, end: date) -> Iterator[date]:
    """Yields every calendar day in [start, end], ascending."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)
