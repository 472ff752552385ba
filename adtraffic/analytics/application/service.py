"""
Entry points for single-day and campaign traffic reports.

Observed records are fetched from an ObservedTrafficSource before
reconciliation. A failing or slow source never fails a report: the affected
days fall back to pure simulation and a warning is logged.
"""
import asyncio
from datetime import date
from typing import Dict, Optional, Sequence, Union
from omegaconf import DictConfig
from ..domain.entities import CampaignReport, TrafficReport
from ..domain.profiles import TrafficProfile
from ..domain.protocols import ObservedTrafficSource
from .report_generator import generate_report
from .reconciliation import coerce_observed, reconcile
from .campaign import aggregate_campaign, validate_range
from ..infrastructure import create_observed_source, NullObservedTrafficSource
from ...common.logging import setup_logger, log_execution_time
from ...common.schemas import ObservedHourlyRecord
from ...common.utils import DateLike, parse_iso_date, iter_dates, validate_volume, validate_asset_id

logger = setup_logger(__name__)

ObservedHours = Dict[int, ObservedHourlyRecord]
ProfileKey = Union[str, TrafficProfile, None]

class TrafficAnalyticsService:
    """
    Generates traffic reports, blending in observed data when available.
    """

    def __init__(
        self,
        observed_source: Optional[ObservedTrafficSource] = None,
        fetch_timeout_seconds: float = 5.0,
        max_concurrent_fetches: int = 8
    ):
        if fetch_timeout_seconds <= 0:
            raise ValueError("fetch_timeout_seconds must be positive")
        if max_concurrent_fetches < 1:
            raise ValueError("max_concurrent_fetches must be at least 1")
        self.observed_source = observed_source or NullObservedTrafficSource()
        self.fetch_timeout_seconds = fetch_timeout_seconds
        self.max_concurrent_fetches = max_concurrent_fetches

    @classmethod
    def from_config(cls, cfg: DictConfig) -> 'TrafficAnalyticsService':
        return cls(
            observed_source=create_observed_source(cfg.observed_source),
            fetch_timeout_seconds=cfg.fetch_timeout_seconds,
            max_concurrent_fetches=cfg.get('max_concurrent_fetches', 8)
        )

    # --- Synchronous API ---

    @log_execution_time(logger)
    def generate_single_day_report(
        self,
        asset_id: str,
        daily_base_volume: float,
        profile_key: ProfileKey,
        date: DateLike
    ) -> TrafficReport:
        validate_asset_id(asset_id)
        validate_volume(daily_base_volume)
        day = parse_iso_date(date)

        report = generate_report(daily_base_volume, profile_key, day, asset_id)
        observed = self._fetch_observed_batch(asset_id, [day])
        return reconcile(report, observed[day])

    @log_execution_time(logger)
    def generate_campaign_report(
        self,
        asset_id: str,
        daily_base_volume: float,
        profile_key: ProfileKey,
        start_date: DateLike,
        end_date: DateLike
    ) -> CampaignReport:
        validate_asset_id(asset_id)
        validate_volume(daily_base_volume)
        start, end = validate_range(start_date, end_date)
        days = list(iter_dates(start, end))
        logger.info(f"Campaign report for {asset_id}: {start} to {end} ({len(days)} days)")

        observed = self._fetch_observed_batch(asset_id, days)
        campaign = self._build_campaign(asset_id, daily_base_volume, profile_key, start, end, observed)
        logger.info(f"Campaign report for {asset_id} done: total volume {campaign.total_campaign_volume}")
        return campaign

    # --- Asynchronous API ---

    @log_execution_time(logger)
    async def agenerate_single_day_report(
        self,
        asset_id: str,
        daily_base_volume: float,
        profile_key: ProfileKey,
        date: DateLike
    ) -> TrafficReport:
        validate_asset_id(asset_id)
        validate_volume(daily_base_volume)
        day = parse_iso_date(date)

        report = generate_report(daily_base_volume, profile_key, day, asset_id)
        observed = await self._afetch_observed_batch(asset_id, [day])
        return reconcile(report, observed[day])

    @log_execution_time(logger)
    async def agenerate_campaign_report(
        self,
        asset_id: str,
        daily_base_volume: float,
        profile_key: ProfileKey,
        start_date: DateLike,
        end_date: DateLike
    ) -> CampaignReport:
        validate_asset_id(asset_id)
        validate_volume(daily_base_volume)
        start, end = validate_range(start_date, end_date)
        days = list(iter_dates(start, end))
        logger.info(f"Campaign report for {asset_id}: {start} to {end} ({len(days)} days)")

        observed = await self._afetch_observed_batch(asset_id, days)
        campaign = self._build_campaign(asset_id, daily_base_volume, profile_key, start, end, observed)
        logger.info(f"Campaign report for {asset_id} done: total volume {campaign.total_campaign_volume}")
        return campaign

    # --- Internals ---

    def _build_campaign(
        self,
        asset_id: str,
        daily_base_volume: float,
        profile_key: ProfileKey,
        start: date,
        end: date,
        observed: Dict[date, ObservedHours]
    ) -> CampaignReport:
        daily_reports = []
        for day in iter_dates(start, end):
            report = generate_report(daily_base_volume, profile_key, day, asset_id)
            report = reconcile(report, observed.get(day, {}))
            if report.used_observed_data:
                logger.debug(f"{asset_id} {day}: observed hours {report.observed_hours}")
            daily_reports.append((day, report))
        return aggregate_campaign(start, end, daily_reports)

    def _fetch_observed(self, asset_id: str, day: date) -> ObservedHours:
        # Malformed source output counts as unavailable data
        return coerce_observed(self.observed_source.fetch_observed_hourly_records(asset_id, day))

    def _fetch_observed_batch(self, asset_id: str, days: Sequence[date]) -> Dict[date, ObservedHours]:
        """
        Runs the concurrent fetch on a private event loop.
        Must not be called from a running event loop; use the async methods there.
        """
        if isinstance(self.observed_source, NullObservedTrafficSource):
            return {day: {} for day in days}

        loop = asyncio.new_event_loop()
        try:
            return loop.run_until_complete(self._afetch_observed_batch(asset_id, days))
        finally:
            # Does not wait for fetches that already timed out
            loop.close()

    async def _afetch_observed_batch(self, asset_id: str, days: Sequence[date]) -> Dict[date, ObservedHours]:
        """
        Fetches every day concurrently, at most max_concurrent_fetches at a time.
        Each fetch has its own timeout; days that fail fall back to simulation.
        """
        if isinstance(self.observed_source, NullObservedTrafficSource):
            return {day: {} for day in days}

        semaphore = asyncio.Semaphore(self.max_concurrent_fetches)
        results = await asyncio.gather(*[
            self._afetch_observed(asset_id, day, semaphore) for day in days
        ])
        return dict(zip(days, results))

    async def _afetch_observed(self, asset_id: str, day: date, semaphore: asyncio.Semaphore) -> ObservedHours:
        async with semaphore:
            try:
                return await asyncio.wait_for(
                    asyncio.to_thread(self._fetch_observed, asset_id, day),
                    timeout=self.fetch_timeout_seconds
                )
            except asyncio.TimeoutError:
                self._warn_unavailable(asset_id, day, TimeoutError(
                    f"no response within {self.fetch_timeout_seconds}s"
                ))
            except Exception as e:
                self._warn_unavailable(asset_id, day, e)
        return {}

    @staticmethod
    def _warn_unavailable(asset_id: str, day: date, error: Exception):
        logger.warning(
            f"Observed data unavailable for {asset_id} on {day}, using simulation only: "
            f"{type(error).__name__}: {error}"
        )
