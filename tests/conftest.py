import pytest
from datetime import date
from adtraffic.analytics.application.report_generator import generate_report
from adtraffic.common.schemas import TrafficHistoryRecord

MONDAY = date(2025, 6, 16)
SATURDAY = date(2025, 6, 21)

@pytest.fixture
def sample_report():
    return generate_report(50000, "commuter", MONDAY, "BB-001")

@pytest.fixture
def make_history_record():
    def _make(hour=10, day=MONDAY, asset_id="BB-001", volume=4200, level="High", speed=25.0):
        return TrafficHistoryRecord(
            asset_id=asset_id,
            date=day,
            hour=hour,
            traffic_volume=volume,
            congestion_level=level,
            average_speed=speed,
            timestamp=f"{day.isoformat()}T{hour:02d}:00:00",
            raw_duration=300,
            raw_static_duration=150,
        )
    return _make
