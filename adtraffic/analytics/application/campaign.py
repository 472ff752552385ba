"""
Rolls single-day reports up into a campaign report over a date range.
"""
from datetime import date
from typing import List, Mapping, Optional, Sequence, Tuple, Union
from ..domain.entities import CampaignReport, DailyTrendEntry, TrafficReport
from ..domain.profiles import TrafficProfile
from .report_generator import generate_report
from .reconciliation import reconcile, ObservedInput
from ...common.exceptions import InvalidArgumentError
from ...common.utils import DateLike, round_half_up, parse_iso_date, iter_dates, validate_volume, validate_asset_id

ObservedByDate = Mapping[date, Mapping[int, ObservedInput]]

def validate_range(start_date: DateLike, end_date: DateLike) -> Tuple[date, date]:
    start = parse_iso_date(start_date, "start_date")
    end = parse_iso_date(end_date, "end_date")
    if start > end:
        raise InvalidArgumentError(f"start_date {start} is after end_date {end}")
    return start, end

def build_trend_entry(day: date, report: TrafficReport) -> DailyTrendEntry:
    """
    Day-level rollup. Congestion and speed are those of the peak-volume hour.
    """
    peak = report.peak_record
    return DailyTrendEntry(
        date=day,
        total_volume=report.daily_total,
        impression_score=report.total_impression_score,
        avg_congestion=peak.congestion_level,
        avg_speed=peak.average_speed,
        used_observed_data=report.used_observed_data,
    )

def aggregate_campaign(start: date, end: date, daily_reports: Sequence[Tuple[date, TrafficReport]]) -> CampaignReport:
    """
    Folds (date, report) pairs into a CampaignReport. Pairs may arrive in any
    order; the trend is emitted by ascending date.
    """
    if not daily_reports:
        raise InvalidArgumentError("A campaign needs at least one day")

    trend: List[DailyTrendEntry] = [
        build_trend_entry(day, report)
        for day, report in sorted(daily_reports, key=lambda pair: pair[0])
    ]

    total_volume = sum(entry.total_volume for entry in trend)

    peak = trend[0]
    for entry in trend[1:]:
        if entry.total_volume > peak.total_volume:
            peak = entry

    return CampaignReport(
        start_date=start,
        end_date=end,
        total_campaign_volume=total_volume,
        average_daily_volume=round_half_up(total_volume / len(trend)),
        peak_day=peak.date,
        peak_day_volume=peak.total_volume,
        total_impression_score=sum(entry.impression_score for entry in trend),
        daily_trend=trend,
    )

def generate_campaign_report(
    daily_base_volume: float,
    profile_key: Union[str, TrafficProfile, None],
    start_date: DateLike,
    end_date: DateLike,
    asset_id: str,
    observed_by_date: Optional[ObservedByDate] = None
) -> CampaignReport:
    """
    Simulates every day in [start_date, end_date], reconciles the days found
    in observed_by_date and aggregates the result.
    """
    validate_volume(daily_base_volume)
    validate_asset_id(asset_id)
    start, end = validate_range(start_date, end_date)
    observed_by_date = observed_by_date or {}

    daily_reports = []
    for day in iter_dates(start, end):
        report = generate_report(daily_base_volume, profile_key, day, asset_id)
        report = reconcile(report, observed_by_date.get(day, {}))
        daily_reports.append((day, report))

    return aggregate_campaign(start, end, daily_reports)
