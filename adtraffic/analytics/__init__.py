"""
Traffic analytics: simulated hourly traffic per asset, reconciled with
observed data, rolled up into campaign reports.
"""
from .domain import CongestionLevel, HourlyRecord, TrafficReport, DailyTrendEntry, CampaignReport, TrafficProfile
from .application import TrafficAnalyticsService

# Pure simulation, no observed data
_default_service = TrafficAnalyticsService()

def generate_single_day_report(asset_id, daily_base_volume, profile_key, date) -> TrafficReport:
    return _default_service.generate_single_day_report(asset_id, daily_base_volume, profile_key, date)

def generate_campaign_report(asset_id, daily_base_volume, profile_key, start_date, end_date) -> CampaignReport:
    return _default_service.generate_campaign_report(asset_id, daily_base_volume, profile_key, start_date, end_date)

__all__ = [
    "CongestionLevel",
    "HourlyRecord",
    "TrafficReport",
    "DailyTrendEntry",
    "CampaignReport",
    "TrafficProfile",
    "TrafficAnalyticsService",
    "generate_single_day_report",
    "generate_campaign_report",
]
