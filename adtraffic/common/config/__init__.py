from .manager import ConfigManager
from .models import AnalyticsConfig, ObservedSourceConfig, ReportRequestConfig

__all__ = ["ConfigManager", "AnalyticsConfig", "ObservedSourceConfig", "ReportRequestConfig"]
