"""
In-process observed traffic sources.
"""
from collections import defaultdict
from datetime import date
from typing import Dict, Iterable
from ...common.schemas import ObservedHourlyRecord, TrafficHistoryRecord

class NullObservedTrafficSource:
    """
    Source with no observations. Reports are pure simulation.
    """
    def fetch_observed_hourly_records(self, asset_id: str, day: date) -> Dict[int, ObservedHourlyRecord]:
        return {}

class InMemoryObservedTrafficSource:
    """
    Dict-backed source, keyed by asset and date.
    Later records for the same hour replace earlier ones.
    """
    def __init__(self, records: Iterable[TrafficHistoryRecord] = ()):
        self._records: Dict[tuple, Dict[int, ObservedHourlyRecord]] = defaultdict(dict)
        for record in records:
            self.add(record)

    def add(self, record: TrafficHistoryRecord):
        self._records[(record.asset_id, record.date)][record.hour] = record.to_observed()

    def fetch_observed_hourly_records(self, asset_id: str, day: date) -> Dict[int, ObservedHourlyRecord]:
        return dict(self._records.get((asset_id, day), {}))
