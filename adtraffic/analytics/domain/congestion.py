"""
Maps hourly volume against a nominal hourly capacity to a congestion tier,
an average speed and an impression (dwell time) multiplier.
"""
import math
from typing import NamedTuple
from .entities import CongestionLevel
from .randomness import seeded_random

# Nominal share of daily traffic a road absorbs per hour
CAPACITY_SHARE = 0.08

SEVERE_RATIO = 1.2
HIGH_RATIO = 0.9
MODERATE_RATIO = 0.5

# Base speeds (km/h)
FREE_FLOW_SPEED = 80
MODERATE_SPEED = 40
SEVERE_SPEED = 5
HIGH_SPEED_SPREAD = 10

IMPRESSION_MULTIPLIERS = {
    CongestionLevel.SEVERE: 2.5,
    CongestionLevel.HIGH: 1.8,
    CongestionLevel.MODERATE: 1.2,
    CongestionLevel.LOW: 1.0,
}

class Classification(NamedTuple):
    level: CongestionLevel
    average_speed: float
    multiplier: float

def capacity_threshold(daily_volume: float) -> float:
    return daily_volume * CAPACITY_SHARE

def multiplier_for(level) -> float:
    """Impression multiplier for a congestion level or its label."""
    return IMPRESSION_MULTIPLIERS[CongestionLevel(level)]

def classify(hourly_volume: float, threshold: float, speed_seed: int) -> Classification:
    """
    Classifies one hour. Ratios are evaluated in order, first match wins.

    speed_seed drives the variable speed of the High tier (30-39 km/h).
    A zero threshold (asset with no traffic) is always Low.
    """
    if threshold <= 0:
        return Classification(CongestionLevel.LOW, FREE_FLOW_SPEED, IMPRESSION_MULTIPLIERS[CongestionLevel.LOW])

    if hourly_volume > threshold * SEVERE_RATIO:
        level, speed = CongestionLevel.SEVERE, SEVERE_SPEED
    elif hourly_volume > threshold * HIGH_RATIO:
        level = CongestionLevel.HIGH
        # Upper bound is exclusive: r == 0.0 would otherwise give 40
        speed = min(
            math.floor(MODERATE_SPEED - seeded_random(speed_seed) * HIGH_SPEED_SPREAD),
            MODERATE_SPEED - 1
        )
    elif hourly_volume > threshold * MODERATE_RATIO:
        level, speed = CongestionLevel.MODERATE, MODERATE_SPEED
    else:
        level, speed = CongestionLevel.LOW, FREE_FLOW_SPEED

    return Classification(level, speed, IMPRESSION_MULTIPLIERS[level])
