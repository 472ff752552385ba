import pytest
from pathlib import Path
from omegaconf import OmegaConf
from adtraffic.analytics.infrastructure import (
    create_observed_source, NullObservedTrafficSource, CSVTrafficHistoryRepository
)
from adtraffic.common.config import ConfigManager
from adtraffic.common.exceptions import ConfigurationError

CONF_DIR = Path(__file__).parents[2] / "conf"

def make_cfg(**overrides):
    cfg = OmegaConf.load(CONF_DIR / "analytics" / "default.yaml")
    for key, value in overrides.items():
        OmegaConf.update(cfg, key, value)
    return cfg

def test_loads_default_profile():
    cfg = ConfigManager(CONF_DIR).load_analytics_config()
    assert cfg.observed_source.type == "none"
    assert cfg.fetch_timeout_seconds == 5.0
    assert cfg.report.asset_id == "BB-001"
    assert cfg.report.profile == "commuter"

def test_missing_profile_raises():
    with pytest.raises(FileNotFoundError):
        ConfigManager(CONF_DIR).load_analytics_config("does-not-exist")

def test_missing_required_key_raises():
    cfg = make_cfg()
    del cfg["report"]
    with pytest.raises(ConfigurationError, match="report"):
        ConfigManager.validate(cfg)

def test_fills_optional_keys_from_schema():
    cfg = make_cfg()
    del cfg["max_concurrent_fetches"]
    assert ConfigManager.validate(cfg).max_concurrent_fetches == 8

@pytest.mark.parametrize("key,value", [
    ("observed_source.type", "kafka"),
    ("fetch_timeout_seconds", 0),
    ("fetch_timeout_seconds", "soon"),
    ("max_concurrent_fetches", 0),
])
def test_invalid_values_raise(key, value):
    with pytest.raises(ConfigurationError):
        ConfigManager.validate(make_cfg(**{key: value}))

def test_create_observed_source(tmp_path):
    assert isinstance(
        create_observed_source(OmegaConf.create({"type": "none"})), NullObservedTrafficSource
    )
    source = create_observed_source(OmegaConf.create({"type": "csv", "csv_dir": str(tmp_path)}))
    assert isinstance(source, CSVTrafficHistoryRepository)
    assert source.output_dir == str(tmp_path)

def test_create_observed_source_unknown_type():
    with pytest.raises(ConfigurationError):
        create_observed_source(OmegaConf.create({"type": "kafka"}))
