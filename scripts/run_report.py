import os
import sys
import hydra
import pandas as pd
from omegaconf import DictConfig

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from adtraffic.analytics import TrafficAnalyticsService
from adtraffic.common.config import ConfigManager
from adtraffic.common.logging import setup_logger, set_log_level

logger = setup_logger("adtraffic.scripts.run_report")

def write_single_day(report, request, output_dir: str) -> str:
    df = pd.DataFrame([record.model_dump(mode="json") for record in report.hourly_breakdown])
    path = os.path.join(output_dir, f"hourly_{request.asset_id}_{request.start_date}.csv")
    df.to_csv(path, index=False)

    print(f"Daily total:       {report.daily_total:,}")
    print(f"Peak hour:         {report.peak_hour}:00 ({report.peak_volume:,} vehicles)")
    print(f"Congestion impact: +{report.congestion_impact_score}%")
    print(f"Observed hours:    {report.observed_hours or 'none (simulated)'}")
    print("\nTop hours by impression score:")
    top = pd.DataFrame([r.model_dump(mode="json") for r in report.top_hours()])
    print(top.to_string(index=False))
    return path

def write_campaign(report, request, output_dir: str) -> str:
    df = pd.DataFrame([entry.model_dump(mode="json") for entry in report.daily_trend])
    path = os.path.join(output_dir, f"campaign_{request.asset_id}_{request.start_date}_{request.end_date}.csv")
    df.to_csv(path, index=False)

    print(df.to_string(index=False))
    print(f"\nTotal volume:      {report.total_campaign_volume:,}")
    print(f"Average per day:   {report.average_daily_volume:,}")
    print(f"Peak day:          {report.peak_day} ({report.peak_day_volume:,})")
    print(f"Total impressions: {report.total_impression_score:,}")
    return path

@hydra.main(version_base=None, config_path="../conf", config_name="config")
def main(cfg: DictConfig):
    analytics_cfg = ConfigManager.validate(cfg.analytics)
    set_log_level(analytics_cfg.log_level)

    service = TrafficAnalyticsService.from_config(analytics_cfg)
    request = analytics_cfg.report
    os.makedirs(analytics_cfg.output_dir, exist_ok=True)

    if request.end_date and request.end_date != request.start_date:
        report = service.generate_campaign_report(
            request.asset_id, request.daily_base_volume, request.profile,
            request.start_date, request.end_date
        )
        path = write_campaign(report, request, analytics_cfg.output_dir)
    else:
        report = service.generate_single_day_report(
            request.asset_id, request.daily_base_volume, request.profile, request.start_date
        )
        path = write_single_day(report, request, analytics_cfg.output_dir)

    logger.info(f"Report saved to {path}")

if __name__ == "__main__":
    main()
