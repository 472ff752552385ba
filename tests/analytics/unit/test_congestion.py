import pytest
from unittest.mock import patch
from adtraffic.analytics.domain.congestion import (
    classify, capacity_threshold, multiplier_for, FREE_FLOW_SPEED
)
from adtraffic.analytics.domain.entities import CongestionLevel

THRESHOLD = 1000.0

def test_capacity_threshold_is_eight_percent():
    assert capacity_threshold(50000) == pytest.approx(4000)

@pytest.mark.parametrize("volume,level,multiplier", [
    (1300, CongestionLevel.SEVERE, 2.5),
    (1201, CongestionLevel.SEVERE, 2.5),
    (1200, CongestionLevel.HIGH, 1.8),
    (901, CongestionLevel.HIGH, 1.8),
    (900, CongestionLevel.MODERATE, 1.2),
    (501, CongestionLevel.MODERATE, 1.2),
    (500, CongestionLevel.LOW, 1.0),
    (0, CongestionLevel.LOW, 1.0),
])
def test_classification_tiers(volume, level, multiplier):
    result = classify(volume, THRESHOLD, speed_seed=7)
    assert result.level is level
    assert result.multiplier == multiplier

def test_fixed_speeds():
    assert classify(1300, THRESHOLD, speed_seed=1).average_speed == 5
    assert classify(600, THRESHOLD, speed_seed=1).average_speed == 40
    assert classify(100, THRESHOLD, speed_seed=1).average_speed == FREE_FLOW_SPEED == 80

def test_high_speed_is_seeded_between_30_and_40():
    speeds = [classify(1000, THRESHOLD, speed_seed=seed).average_speed for seed in range(1, 300)]
    assert all(30 <= s < 40 for s in speeds)
    assert len(set(speeds)) > 1

def test_high_speed_is_deterministic():
    assert classify(1000, THRESHOLD, speed_seed=42) == classify(1000, THRESHOLD, speed_seed=42)

def test_zero_threshold_is_always_low():
    for volume in (0, 10, 10_000):
        result = classify(volume, 0, speed_seed=3)
        assert result.level is CongestionLevel.LOW
        assert result.average_speed == 80
        assert result.multiplier == 1.0

@pytest.mark.parametrize("level,expected", [
    ("Severe", 2.5), ("High", 1.8), ("Moderate", 1.2), ("Low", 1.0),
    (CongestionLevel.SEVERE, 2.5),
])
def test_multiplier_for(level, expected):
    assert multiplier_for(level) == expected

def test_multiplier_for_unknown_label():
    with pytest.raises(ValueError):
        multiplier_for("Gridlock")

@pytest.mark.parametrize("draw,expected", [(0.0, 39), (0.05, 39), (0.5, 35), (0.9999, 30)])
def test_high_speed_stays_below_forty(draw, expected):
    with patch("adtraffic.analytics.domain.congestion.seeded_random", return_value=draw):
        assert classify(1000, THRESHOLD, speed_seed=1).average_speed == expected
