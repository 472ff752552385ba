import pytest
from datetime import date
from pydantic import ValidationError
from adtraffic.analytics.domain.entities import (
    CongestionLevel, HourlyRecord, TrafficReport, DailyTrendEntry
)

def make_hours(volumes=None):
    volumes = volumes or [100] * 24
    return [
        HourlyRecord(hour=h, traffic_volume=v, congestion_level=CongestionLevel.LOW,
                     average_speed=80, impression_score=v)
        for h, v in enumerate(volumes)
    ]

def test_hourly_record_rejects_negative_values():
    with pytest.raises(ValidationError):
        HourlyRecord(hour=1, traffic_volume=-1, congestion_level="Low", average_speed=80, impression_score=0)
    with pytest.raises(ValidationError):
        HourlyRecord(hour=1, traffic_volume=1, congestion_level="Low", average_speed=-5, impression_score=1)

def test_hourly_record_rejects_hour_out_of_range():
    with pytest.raises(ValidationError):
        HourlyRecord(hour=24, traffic_volume=1, congestion_level="Low", average_speed=80, impression_score=1)

def test_congestion_level_accepts_labels():
    record = HourlyRecord(hour=0, traffic_volume=1, congestion_level="Severe", average_speed=5, impression_score=3)
    assert record.congestion_level is CongestionLevel.SEVERE
    assert record.congestion_level == "Severe"

def test_report_requires_every_hour_in_order():
    hours = make_hours()
    with pytest.raises(ValidationError):
        TrafficReport(daily_total=2300, peak_hour=0, peak_volume=100,
                      congestion_impact_score=0, hourly_breakdown=hours[:23])
    with pytest.raises(ValidationError):
        TrafficReport(daily_total=2400, peak_hour=0, peak_volume=100,
                      congestion_impact_score=0, hourly_breakdown=list(reversed(hours)))

def test_report_is_immutable(sample_report):
    with pytest.raises(ValidationError):
        sample_report.daily_total = 1
    with pytest.raises(ValidationError):
        sample_report.hourly_breakdown[0].traffic_volume = 1

def test_top_hours_orders_by_impression_then_hour():
    volumes = [10] * 24
    volumes[3] = 50
    volumes[20] = 50
    volumes[12] = 70
    report = TrafficReport(daily_total=sum(volumes), peak_hour=12, peak_volume=70,
                           congestion_impact_score=0, hourly_breakdown=make_hours(volumes))
    assert [r.hour for r in report.top_hours(4)] == [12, 3, 20, 0]
    assert len(report.top_hours()) == 8

def test_report_serializes_levels_as_labels(sample_report):
    dumped = sample_report.model_dump(mode="json")
    assert dumped["hourly_breakdown"][0]["congestion_level"] in {"Low", "Moderate", "High", "Severe"}
    assert len(dumped["hourly_breakdown"]) == 24

def test_daily_trend_entry_round_trips_date():
    entry = DailyTrendEntry(date="2025-01-02", total_volume=10, impression_score=12,
                            avg_congestion="Moderate", avg_speed=40)
    assert entry.date == date(2025, 1, 2)
    assert entry.model_dump(mode="json")["date"] == "2025-01-02"

def test_report_collections_cannot_be_mutated(sample_report):
    assert isinstance(sample_report.hourly_breakdown, tuple)
    assert isinstance(sample_report.observed_hours, tuple)
    with pytest.raises(AttributeError):
        sample_report.hourly_breakdown.pop()
    assert len(sample_report.hourly_breakdown) == 24
