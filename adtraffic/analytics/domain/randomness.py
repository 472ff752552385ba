"""
Seeded pseudo-randomness for reproducible reports.

The same asset on the same date always gets the same noise, so a report does
not change between refreshes.
"""
import math
from datetime import date

# Offset separating hourly volume noise from the daily variance draw
HOURLY_NOISE_OFFSET = 100

def seeded_random(seed: int) -> float:
    """
    Returns a float in [0, 1) that depends only on the integer seed.
    """
    x = math.sin(seed) * 10000
    return x - math.floor(x)

def derive_seed(asset_id: str, day: date) -> int:
    """
    Base seed for an asset and date: sum of the character codes of
    "{asset_id}-{YYYY-MM-DD}".
    """
    return sum(ord(ch) for ch in f"{asset_id}-{day.isoformat()}")
