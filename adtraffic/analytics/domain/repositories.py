"""
Domain repositories for the traffic analytics module.
"""
from typing import Protocol
from ...common.schemas import TrafficHistoryRecord

class TrafficHistoryRepository(Protocol):
    """
    Abstract base class for saving observed traffic samples.
    """
    def save(self, record: TrafficHistoryRecord):
        ...
