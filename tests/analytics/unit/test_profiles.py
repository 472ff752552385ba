import pytest
from adtraffic.analytics.domain.profiles import (
    TrafficProfile, DEFAULT_PROFILE, get_distribution, resolve_profile, is_known_profile, weekend_multiplier
)

@pytest.mark.parametrize("profile", list(TrafficProfile))
def test_distribution_has_24_non_negative_shares_summing_to_one(profile):
    distribution = get_distribution(profile)
    assert len(distribution) == 24
    assert all(share >= 0 for share in distribution)
    assert sum(distribution) == pytest.approx(1.0, abs=1e-9)

def test_commuter_peaks_at_rush_hours():
    distribution = get_distribution("commuter")
    top = max(distribution)
    peaks = {hour for hour, share in enumerate(distribution) if share == top}
    assert peaks <= {7, 8, 17, 18}

def test_retail_peaks_late_afternoon():
    distribution = get_distribution("retail")
    assert distribution.index(max(distribution)) == 17

def test_residential_is_flatter_than_commuter():
    assert max(get_distribution("residential")) < max(get_distribution("commuter"))

@pytest.mark.parametrize("key,expected", [
    ("commuter", TrafficProfile.COMMUTER),
    ("RETAIL", TrafficProfile.RETAIL),
    ("  Highway ", TrafficProfile.HIGHWAY),
    ("tourist", TrafficProfile.TOURIST),
    ("Residential", TrafficProfile.RESIDENTIAL),
    (TrafficProfile.TOURIST, TrafficProfile.TOURIST),
])
def test_resolve_known_profiles(key, expected):
    assert resolve_profile(key) is expected
    assert is_known_profile(key)

@pytest.mark.parametrize("key", ["stadium", "", None, "commuters"])
def test_unknown_profile_falls_back_to_commuter(key):
    assert resolve_profile(key) is DEFAULT_PROFILE is TrafficProfile.COMMUTER
    assert not is_known_profile(key)
    assert get_distribution(key) == get_distribution("commuter")

def test_distribution_table_is_read_only():
    distribution = get_distribution("highway")
    with pytest.raises(TypeError):
        distribution[0] = 0.5

def test_weekend_multipliers():
    assert weekend_multiplier(TrafficProfile.COMMUTER) == 0.8
    assert weekend_multiplier(TrafficProfile.RETAIL) == 1.25
    assert weekend_multiplier(TrafficProfile.TOURIST) == 1.25
    assert weekend_multiplier(TrafficProfile.HIGHWAY) == 1.0
    assert weekend_multiplier(TrafficProfile.RESIDENTIAL) == 1.0
