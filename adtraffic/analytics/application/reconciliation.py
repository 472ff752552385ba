"""
Overlays externally observed hours on a simulated report.
"""
from typing import Dict, Mapping, Union
from pydantic import ValidationError
from ..domain.entities import CongestionLevel, TrafficReport
from ..domain.congestion import multiplier_for
from .report_generator import summarize
from ...common.exceptions import InvalidArgumentError
from ...common.schemas import ObservedHourlyRecord
from ...common.utils import round_half_up

ObservedInput = Union[ObservedHourlyRecord, Mapping]

def coerce_observed(observed: Mapping[int, ObservedInput]) -> Dict[int, ObservedHourlyRecord]:
    """
    Validates observed hours. The mapping key decides the hour of each record.
    """
    records = {}
    for hour, value in observed.items():
        if isinstance(value, ObservedHourlyRecord):
            value = value.model_dump()
        try:
            record = ObservedHourlyRecord.model_validate({**value, 'hour': hour})
        except (ValidationError, TypeError) as e:
            raise InvalidArgumentError(f"Invalid observed record for hour {hour}: {e}") from e
        records[hour] = record
    return records

def reconcile(report: TrafficReport, observed: Mapping[int, ObservedInput]) -> TrafficReport:
    """
    Replaces simulated hours with observed ones and recomputes the aggregates.

    Observed hours keep the fixed multiplier table for their impression score;
    hours without observations are left as simulated. An empty mapping
    returns the report unchanged.
    """
    if not observed:
        return report

    records = coerce_observed(observed)

    merged = []
    for item in report.hourly_breakdown:
        real = records.get(item.hour)
        if real is None:
            merged.append(item)
            continue
        merged.append(item.model_copy(update={
            'traffic_volume': real.traffic_volume,
            'congestion_level': CongestionLevel(real.congestion_level),
            'average_speed': real.average_speed,
            'impression_score': round_half_up(real.traffic_volume * multiplier_for(real.congestion_level)),
        }))

    observed_hours = sorted(set(report.observed_hours) | set(records))
    return summarize(merged, used_observed_data=True, observed_hours=observed_hours)
