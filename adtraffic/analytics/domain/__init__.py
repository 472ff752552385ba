"""
Domain module initialization.
"""
from .entities import (
    CongestionLevel,
    HourlyRecord,
    TrafficReport,
    DailyTrendEntry,
    CampaignReport
)
from .profiles import TrafficProfile, get_distribution, resolve_profile
from .randomness import seeded_random, derive_seed
from .congestion import Classification, classify, multiplier_for
from .protocols import ObservedTrafficSource
from .repositories import TrafficHistoryRepository
