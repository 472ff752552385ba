from dataclasses import dataclass, field
from typing import Optional

@dataclass
class ObservedSourceConfig:
    type: str = "none"
    csv_dir: str = "data/traffic_history"
    database_url: str = "sqlite:///data/adtraffic.db"

@dataclass
class ReportRequestConfig:
    asset_id: str = "BB-001"
    daily_base_volume: float = 50000
    profile: str = "commuter"
    start_date: str = "2025-06-16"
    end_date: Optional[str] = None # Single-day report when unset

@dataclass
class AnalyticsConfig:
    observed_source: ObservedSourceConfig = field(default_factory=ObservedSourceConfig)
    fetch_timeout_seconds: float = 5.0
    max_concurrent_fetches: int = 8
    log_level: str = "INFO"
    report: ReportRequestConfig = field(default_factory=ReportRequestConfig)
    output_dir: str = "data/reports"
