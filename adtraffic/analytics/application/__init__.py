from .report_generator import generate_report, summarize, adjusted_daily_volume
from .reconciliation import reconcile
from .campaign import generate_campaign_report, aggregate_campaign
from .service import TrafficAnalyticsService

__all__ = [
    "generate_report",
    "summarize",
    "adjusted_daily_volume",
    "reconcile",
    "generate_campaign_report",
    "aggregate_campaign",
    "TrafficAnalyticsService",
]
