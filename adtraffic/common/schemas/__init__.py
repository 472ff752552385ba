from .traffic import ObservedHourlyRecord, TrafficHistoryRecord, RouteObservation, CongestionLabel

__all__ = [
    "ObservedHourlyRecord",
    "TrafficHistoryRecord",
    "RouteObservation",
    "CongestionLabel",
]
