"""
Derives observed hourly records from traffic-aware route samples.

A route of a couple of kilometres passing the asset is timed with and without
current traffic; the ratio between both durations drives the congestion tier
and the volume estimate.
"""
from datetime import datetime
from typing import NamedTuple, Optional
from .entities import CongestionLevel
from ...common.schemas import RouteObservation, TrafficHistoryRecord
from ...common.utils import round_half_up

DEFAULT_DAILY_VOLUME = 50000
# Rough number of busy hours a daily volume is spread over
ACTIVE_HOURS = 15

class DelayClassification(NamedTuple):
    level: CongestionLevel
    average_speed: float

# (ratio strictly above, level, km/h), evaluated in order
DELAY_TIERS = (
    (2.0, CongestionLevel.SEVERE, 10),
    (1.5, CongestionLevel.HIGH, 25),
    (1.2, CongestionLevel.MODERATE, 40),
)
FREE_FLOW = DelayClassification(CongestionLevel.LOW, 70)

def classify_delay_ratio(delay_ratio: float) -> DelayClassification:
    for lower_bound, level, speed in DELAY_TIERS:
        if delay_ratio > lower_bound:
            return DelayClassification(level, speed)
    return FREE_FLOW

def estimate_hourly_volume(daily_base_volume: Optional[float], delay_ratio: float) -> int:
    """More delay means more vehicles on the road, until gridlock."""
    base_hourly_volume = (daily_base_volume or DEFAULT_DAILY_VOLUME) / ACTIVE_HOURS
    return max(0, round_half_up(base_hourly_volume * delay_ratio))

def observation_to_record(
    asset_id: str,
    daily_base_volume: Optional[float],
    observation: RouteObservation,
    at: datetime,
    source: str = "routes-api"
) -> TrafficHistoryRecord:
    ratio = observation.delay_ratio
    classification = classify_delay_ratio(ratio)
    return TrafficHistoryRecord(
        asset_id=asset_id,
        date=at.date(),
        hour=at.hour,
        timestamp=at.isoformat(),
        traffic_volume=estimate_hourly_volume(daily_base_volume, ratio),
        congestion_level=classification.level.value,
        average_speed=classification.average_speed,
        raw_duration=observation.duration_seconds,
        raw_static_duration=observation.static_duration_seconds,
        source=source,
    )
