"""
Synthesizes a 24-hour traffic report for one asset and date.
"""
from datetime import date
from typing import List, Sequence, Union
from ..domain.entities import HourlyRecord, TrafficReport
from ..domain.profiles import TrafficProfile, get_distribution, resolve_profile, is_known_profile, weekend_multiplier
from ..domain.randomness import seeded_random, derive_seed, HOURLY_NOISE_OFFSET
from ..domain.congestion import classify, capacity_threshold
from ...common.logging import setup_logger
from ...common.utils import DateLike, round_half_up, parse_iso_date, validate_volume, validate_asset_id

logger = setup_logger(__name__)

DAILY_VARIANCE_FLOOR = 0.9
DAILY_VARIANCE_SPAN = 0.2      # 0.9 to 1.1
HOURLY_NOISE_FLOOR = 0.85
HOURLY_NOISE_SPAN = 0.3        # 0.85 to 1.15

def is_weekend(day: date) -> bool:
    return day.weekday() >= 5

def volume_multiplier(profile: TrafficProfile, day: date) -> float:
    if is_weekend(day):
        return weekend_multiplier(profile)
    return 1.0

def adjusted_daily_volume(daily_base_volume: float, profile: TrafficProfile, day: date, seed: int) -> int:
    """Base volume after the weekend adjustment and the seeded daily variance."""
    daily_variance = DAILY_VARIANCE_FLOOR + seeded_random(seed) * DAILY_VARIANCE_SPAN
    return round_half_up(daily_base_volume * volume_multiplier(profile, day) * daily_variance)

def congestion_impact(total_impression_score: int, daily_total: int) -> int:
    """Percentage of extra exposure gained from congestion; 0 for an empty day."""
    if daily_total == 0:
        return 0
    return round_half_up(((total_impression_score - daily_total) / daily_total) * 100)

def summarize(hourly_breakdown: Sequence[HourlyRecord], **extra) -> TrafficReport:
    """
    Builds a report from 24 hourly records, computing totals, peak and impact.
    """
    daily_total = sum(record.traffic_volume for record in hourly_breakdown)
    total_impression_score = sum(record.impression_score for record in hourly_breakdown)

    # Strict comparison keeps the earliest hour on ties
    peak = hourly_breakdown[0]
    for record in hourly_breakdown[1:]:
        if record.traffic_volume > peak.traffic_volume:
            peak = record

    return TrafficReport(
        daily_total=daily_total,
        peak_hour=peak.hour,
        peak_volume=peak.traffic_volume,
        congestion_impact_score=congestion_impact(total_impression_score, daily_total),
        hourly_breakdown=tuple(hourly_breakdown),
        **extra
    )

def generate_report(
    daily_base_volume: float,
    profile_key: Union[str, TrafficProfile, None],
    day: DateLike,
    asset_id: str
) -> TrafficReport:
    """
    Generates the simulated report for one asset on one day.

    The result depends only on the arguments: the same asset, date, profile
    and base volume always produce the same report.
    """
    validate_volume(daily_base_volume)
    validate_asset_id(asset_id)
    day = parse_iso_date(day)

    profile = resolve_profile(profile_key)
    if not is_known_profile(profile_key):
        logger.debug(f"Unknown profile '{profile_key}' for {asset_id}, using {profile.value}")
    distribution = get_distribution(profile)

    seed = derive_seed(asset_id, day)
    adjusted_volume = adjusted_daily_volume(daily_base_volume, profile, day, seed)
    threshold = capacity_threshold(adjusted_volume)

    hourly_breakdown: List[HourlyRecord] = []
    for hour, share in enumerate(distribution):
        hourly_noise = HOURLY_NOISE_FLOOR + seeded_random(seed + hour + HOURLY_NOISE_OFFSET) * HOURLY_NOISE_SPAN
        volume = max(0, round_half_up(adjusted_volume * share * hourly_noise))

        classification = classify(volume, threshold, speed_seed=seed + hour)
        hourly_breakdown.append(HourlyRecord(
            hour=hour,
            traffic_volume=volume,
            congestion_level=classification.level,
            average_speed=classification.average_speed,
            impression_score=round_half_up(volume * classification.multiplier),
        ))

    return summarize(hourly_breakdown)
