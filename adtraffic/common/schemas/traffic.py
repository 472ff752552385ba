from datetime import date as Date
from typing import Literal, Optional
from pydantic import BaseModel, Field, field_validator

CongestionLabel = Literal['Low', 'Moderate', 'High', 'Severe']

class ObservedHourlyRecord(BaseModel):
    """
    Represents one externally observed hour of traffic at an asset.
    """
    hour: int = Field(..., ge=0, le=23, description="Hour of the day (0-23)")
    traffic_volume: int = Field(..., ge=0, description="Vehicles observed during the hour")
    congestion_level: CongestionLabel = Field(..., description="Observed congestion tier")
    average_speed: float = Field(..., ge=0.0, description="Average speed in km/h")

class TrafficHistoryRecord(ObservedHourlyRecord):
    """
    Represents a stored observation for an asset.
    Corresponds to the traffic_history table.
    """
    asset_id: str = Field(..., min_length=1, description="Billboard identifier")
    date: Date = Field(..., description="Calendar date of the observation")
    timestamp: Optional[str] = Field(None, description="ISO timestamp when the sample was taken")
    raw_duration: Optional[int] = Field(None, ge=0, description="Traffic-aware route duration in seconds")
    raw_static_duration: Optional[int] = Field(None, ge=0, description="Free-flow route duration in seconds")
    source: str = Field("routes-api", description="Origin of the observation")

    def to_observed(self) -> ObservedHourlyRecord:
        return ObservedHourlyRecord(
            hour=self.hour,
            traffic_volume=self.traffic_volume,
            congestion_level=self.congestion_level,
            average_speed=self.average_speed,
        )

class RouteObservation(BaseModel):
    """
    Represents a traffic-aware route sample taken past an asset.
    """
    duration_seconds: int = Field(..., gt=0, description="Route duration with current traffic")
    static_duration_seconds: int = Field(..., gt=0, description="Route duration in free flow")

    @field_validator('duration_seconds', 'static_duration_seconds', mode='before')
    @classmethod
    def parse_duration(cls, v):
        # Routing APIs report durations as strings such as "412s"
        if isinstance(v, str):
            return int(v.strip().rstrip('s'))
        return v

    @property
    def delay_ratio(self) -> float:
        return self.duration_seconds / self.static_duration_seconds
