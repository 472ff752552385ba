"""
Domain entities for the traffic analytics module.

All reports are immutable values, built fresh for every request.
"""
from datetime import date
from enum import Enum
from typing import List, Tuple
from pydantic import BaseModel, Field, ConfigDict, field_validator

HOURS_PER_DAY = 24

class CongestionLevel(str, Enum):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    SEVERE = "Severe"

class HourlyRecord(BaseModel):
    """
    One hour of one day for one asset.
    """
    hour: int = Field(..., ge=0, le=23, description="Hour of the day (0-23)")
    traffic_volume: int = Field(..., ge=0, description="Vehicle/pedestrian count for the hour")
    congestion_level: CongestionLevel = Field(..., description="Congestion tier")
    average_speed: float = Field(..., ge=0.0, description="Average speed in km/h")
    impression_score: int = Field(..., ge=0, description="Volume weighted by dwell time")

    model_config = ConfigDict(frozen=True)

class TrafficReport(BaseModel):
    """
    Traffic report for one asset on one day.
    """
    daily_total: int = Field(..., ge=0, description="Sum of hourly volumes")
    peak_hour: int = Field(..., ge=0, le=23, description="Earliest hour with the highest volume")
    peak_volume: int = Field(..., ge=0, description="Volume at the peak hour")
    congestion_impact_score: int = Field(..., description="Exposure bonus from congestion, in percent")
    hourly_breakdown: Tuple[HourlyRecord, ...] = Field(..., description="24 records, hour ascending")
    used_observed_data: bool = Field(False, description="True if any hour comes from observed data")
    observed_hours: Tuple[int, ...] = Field((), description="Hours replaced by observed data")

    model_config = ConfigDict(frozen=True)

    @field_validator('hourly_breakdown')
    @classmethod
    def breakdown_must_cover_the_day(cls, v: Tuple[HourlyRecord, ...]) -> Tuple[HourlyRecord, ...]:
        if [record.hour for record in v] != list(range(HOURS_PER_DAY)):
            raise ValueError('hourly_breakdown must hold exactly one record per hour 0-23, in order')
        return v

    @property
    def total_impression_score(self) -> int:
        return sum(record.impression_score for record in self.hourly_breakdown)

    @property
    def peak_record(self) -> HourlyRecord:
        return self.hourly_breakdown[self.peak_hour]

    def top_hours(self, n: int = 8) -> List[HourlyRecord]:
        """Hours with the highest impression score, ties by earlier hour."""
        ranked = sorted(self.hourly_breakdown, key=lambda r: (-r.impression_score, r.hour))
        return ranked[:n]

class DailyTrendEntry(BaseModel):
    """
    One day within a campaign.
    """
    date: date
    total_volume: int = Field(..., ge=0)
    impression_score: int = Field(..., ge=0)
    avg_congestion: CongestionLevel = Field(..., description="Congestion at the day's peak hour")
    avg_speed: float = Field(..., ge=0.0, description="Speed at the day's peak hour (km/h)")
    used_observed_data: bool = False

    model_config = ConfigDict(frozen=True)

class CampaignReport(BaseModel):
    """
    Rollup of daily reports over an inclusive date range.
    """
    start_date: date
    end_date: date
    total_campaign_volume: int = Field(..., ge=0)
    average_daily_volume: int = Field(..., ge=0)
    peak_day: date
    peak_day_volume: int = Field(..., ge=0)
    total_impression_score: int = Field(..., ge=0)
    daily_trend: Tuple[DailyTrendEntry, ...]

    model_config = ConfigDict(frozen=True)

    @property
    def number_of_days(self) -> int:
        return len(self.daily_trend)
