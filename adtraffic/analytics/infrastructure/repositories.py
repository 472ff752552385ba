import os
import csv
import re
from datetime import date
from typing import Dict
from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from ..domain.repositories import TrafficHistoryRepository
from ...common.database import TrafficHistoryDB
from ...common.exceptions import ExternalDataUnavailableError
from ...common.logging import setup_logger
from ...common.schemas import ObservedHourlyRecord, TrafficHistoryRecord

logger = setup_logger(__name__)

CSV_COLUMNS = [
    "timestamp", "asset_id", "date", "hour", "traffic_volume", "congestion_level",
    "average_speed", "raw_duration", "raw_static_duration", "source"
]

class CSVTrafficHistoryRepository(TrafficHistoryRepository):
    """
    Saves observed traffic samples to CSV files and reads them back.
    One file per asset.
    """
    def __init__(self, output_dir: str):
        self.output_dir = output_dir
        os.makedirs(self.output_dir, exist_ok=True)

    def _get_filename(self, asset_id: str) -> str:
        safe_id = re.sub(r"[^A-Za-z0-9_.-]", "_", asset_id)
        return os.path.join(self.output_dir, f"traffic_history_{safe_id}.csv")

    def _ensure_file_exists(self, filename: str):
        if not os.path.exists(filename):
            with open(filename, mode='w', newline='') as f:
                writer = csv.writer(f)
                writer.writerow(CSV_COLUMNS)

    def save(self, record: TrafficHistoryRecord):
        filename = self._get_filename(record.asset_id)
        self._ensure_file_exists(filename)

        with open(filename, mode='a', newline='') as f:
            writer = csv.writer(f)
            writer.writerow([
                record.timestamp or "",
                record.asset_id,
                record.date.isoformat(),
                record.hour,
                record.traffic_volume,
                record.congestion_level,
                f"{record.average_speed:.2f}",
                "" if record.raw_duration is None else record.raw_duration,
                "" if record.raw_static_duration is None else record.raw_static_duration,
                record.source
            ])

    def fetch_observed_hourly_records(self, asset_id: str, day: date) -> Dict[int, ObservedHourlyRecord]:
        filename = self._get_filename(asset_id)
        if not os.path.exists(filename):
            return {}

        records = {}
        try:
            with open(filename, mode='r', newline='') as f:
                for row in csv.DictReader(f):
                    if row.get("asset_id") != asset_id or row.get("date") != day.isoformat():
                        continue
                    # Empty optional columns are stored as ""
                    values = {k: v for k, v in row.items() if v != ""}
                    record = TrafficHistoryRecord.model_validate(values)
                    records[record.hour] = record.to_observed()
        except (OSError, csv.Error, ValidationError) as e:
            raise ExternalDataUnavailableError(f"Failed to read {filename}: {e}") from e

        logger.debug(f"Loaded {len(records)} observed hours for {asset_id} on {day}")
        return records


class SQLTrafficHistoryRepository(TrafficHistoryRepository):
    """
    Stores observed traffic samples in the traffic_history table.
    """
    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def save(self, record: TrafficHistoryRecord):
        with self.session_factory() as session:
            session.add(TrafficHistoryDB(
                asset_id=record.asset_id,
                date=record.date,
                hour=record.hour,
                timestamp=record.timestamp,
                traffic_volume=record.traffic_volume,
                congestion_level=record.congestion_level,
                average_speed=record.average_speed,
                raw_duration=record.raw_duration,
                raw_static_duration=record.raw_static_duration,
                source=record.source,
            ))
            session.commit()

    def fetch_observed_hourly_records(self, asset_id: str, day: date) -> Dict[int, ObservedHourlyRecord]:
        query = (
            select(TrafficHistoryDB)
            .where(TrafficHistoryDB.asset_id == asset_id, TrafficHistoryDB.date == day)
            .order_by(TrafficHistoryDB.id)
        )
        records = {}
        try:
            with self.session_factory() as session:
                for row in session.scalars(query):
                    records[row.hour] = ObservedHourlyRecord(
                        hour=row.hour,
                        traffic_volume=row.traffic_volume,
                        congestion_level=row.congestion_level,
                        average_speed=row.average_speed,
                    )
        except (SQLAlchemyError, ValidationError) as e:
            raise ExternalDataUnavailableError(f"Failed to query traffic_history: {e}") from e
        return records
