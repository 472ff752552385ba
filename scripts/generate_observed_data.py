import argparse
import datetime
import os
import sys
import numpy as np
import pandas as pd

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from adtraffic.analytics.domain.observations import observation_to_record
from adtraffic.analytics.infrastructure import CSVTrafficHistoryRepository
from adtraffic.common.schemas import RouteObservation

# Free-flow duration of the ~2 km sampling route past the asset
STATIC_DURATION_SECONDS = 150
RUSH_HOURS = [7, 8, 17, 18]

def generate_data(asset_id, daily_base_volume, start, days, hours, output_dir, seed=42):
    print(f"Generating observed traffic for {asset_id}: {days} days from {start}...")
    rng = np.random.default_rng(seed)
    repository = CSVTrafficHistoryRepository(output_dir=output_dir)

    rows = []
    for offset in range(days):
        current_date = start + datetime.timedelta(days=offset)
        for hour in hours:
            # Rush hours are slower and more variable
            if hour in RUSH_HOURS:
                delay_ratio = rng.uniform(1.3, 2.4)
            else:
                delay_ratio = rng.uniform(1.0, 1.4)

            observation = RouteObservation(
                duration_seconds=int(STATIC_DURATION_SECONDS * delay_ratio),
                static_duration_seconds=STATIC_DURATION_SECONDS
            )
            at = datetime.datetime.combine(current_date, datetime.time(hour=hour))
            record = observation_to_record(asset_id, daily_base_volume, observation, at, source="synthetic")
            repository.save(record)
            rows.append(record.model_dump(mode="json"))

    df = pd.DataFrame(rows)
    print(df.groupby("congestion_level")["traffic_volume"].describe())
    print(f"Observations saved under {output_dir}")

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Generate synthetic observed traffic records")
    parser.add_argument("--asset-id", default="BB-001")
    parser.add_argument("--daily-volume", type=float, default=50000)
    parser.add_argument("--start", default="2025-06-16")
    parser.add_argument("--days", type=int, default=7)
    parser.add_argument("--hours", type=int, nargs="+", default=RUSH_HOURS + [12])
    parser.add_argument("--output-dir", default="data/traffic_history")
    args = parser.parse_args()

    generate_data(
        args.asset_id,
        args.daily_volume,
        datetime.date.fromisoformat(args.start),
        args.days,
        args.hours,
        args.output_dir
    )
