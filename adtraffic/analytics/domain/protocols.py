"""
Domain protocols for the traffic analytics module.
"""
from datetime import date
from typing import Dict, Protocol
from ...common.schemas import ObservedHourlyRecord

class ObservedTrafficSource(Protocol):
    """
    Protocol for external stores of observed hourly traffic.

    Returns an empty mapping when nothing was observed for the date and raises
    ExternalDataUnavailableError when the store cannot be reached.
    """
    def fetch_observed_hourly_records(self, asset_id: str, day: date) -> Dict[int, ObservedHourlyRecord]:
        ...
