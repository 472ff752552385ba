"""
Hourly traffic distribution curves per traffic profile.
"""
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple, Union

class TrafficProfile(str, Enum):
    COMMUTER = "commuter"
    RETAIL = "retail"
    HIGHWAY = "highway"
    TOURIST = "tourist"
    RESIDENTIAL = "residential"

DEFAULT_PROFILE = TrafficProfile.COMMUTER

# Share of daily traffic per hour (0-23). Each curve sums to 1.0.
_DISTRIBUTIONS: Mapping[TrafficProfile, Tuple[float, ...]] = MappingProxyType({
    # Rush hours at 7-8 AM and 5-6 PM
    TrafficProfile.COMMUTER: (
        0.01, 0.01, 0.01, 0.01, 0.02, 0.04, 0.07, 0.11, 0.09, 0.04,  # 0-9 AM
        0.04, 0.04, 0.04, 0.04, 0.04, 0.04, 0.07, 0.11, 0.08, 0.03,  # 10AM-7PM
        0.02, 0.02, 0.01, 0.01,                                      # 8PM-11PM
    ),
    # Midday plateau building to a late afternoon peak
    TrafficProfile.RETAIL: (
        0.00, 0.00, 0.00, 0.00, 0.00, 0.01, 0.01, 0.02, 0.03, 0.04,
        0.06, 0.07, 0.08, 0.08, 0.07, 0.08, 0.09, 0.10, 0.08, 0.07,
        0.05, 0.03, 0.02, 0.01,
    ),
    # Steady flow with minor peaks
    TrafficProfile.HIGHWAY: (
        0.02, 0.01, 0.01, 0.01, 0.02, 0.03, 0.05, 0.07, 0.06, 0.05,
        0.05, 0.05, 0.05, 0.05, 0.05, 0.06, 0.07, 0.08, 0.06, 0.05,
        0.03, 0.03, 0.02, 0.02,
    ),
    # Late morning and evening into night
    TrafficProfile.TOURIST: (
        0.01, 0.00, 0.00, 0.00, 0.00, 0.01, 0.02, 0.03, 0.05, 0.06,
        0.07, 0.07, 0.06, 0.06, 0.05, 0.06, 0.06, 0.06, 0.07, 0.07,
        0.07, 0.06, 0.04, 0.02,
    ),
    # Morning and evening bumps, flatter than commuter
    TrafficProfile.RESIDENTIAL: (
        0.01, 0.01, 0.01, 0.01, 0.01, 0.03, 0.07, 0.09, 0.07, 0.05,
        0.04, 0.04, 0.04, 0.04, 0.04, 0.04, 0.06, 0.08, 0.07, 0.05,
        0.05, 0.04, 0.03, 0.02,
    ),
})

# Weekend volume adjustment; profiles not listed are unchanged
WEEKEND_MULTIPLIERS: Mapping[TrafficProfile, float] = MappingProxyType({
    TrafficProfile.COMMUTER: 0.8,
    TrafficProfile.RETAIL: 1.25,
    TrafficProfile.TOURIST: 1.25,
})

def resolve_profile(profile_key: Union[str, TrafficProfile, None]) -> TrafficProfile:
    """
    Maps a profile key (case-insensitive) to a TrafficProfile.
    Unknown or empty keys resolve to the commuter profile.
    """
    if isinstance(profile_key, TrafficProfile):
        return profile_key

    normalized = str(profile_key).strip().lower() if profile_key is not None else ""
    for profile in TrafficProfile:
        if profile.value == normalized:
            return profile
    return DEFAULT_PROFILE

def is_known_profile(profile_key: Union[str, TrafficProfile, None]) -> bool:
    if isinstance(profile_key, TrafficProfile):
        return True
    if profile_key is None:
        return False
    return str(profile_key).strip().lower() in {p.value for p in TrafficProfile}

def get_distribution(profile_key: Union[str, TrafficProfile, None]) -> Tuple[float, ...]:
    return _DISTRIBUTIONS[resolve_profile(profile_key)]

def weekend_multiplier(profile: TrafficProfile) -> float:
    return WEEKEND_MULTIPLIERS.get(profile, 1.0)
