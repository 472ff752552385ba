from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException
from pathlib import Path
from .models import AnalyticsConfig
from ..exceptions import ConfigurationError

VALID_SOURCE_TYPES = ("none", "csv", "sql")

class ConfigManager:
    """Centralizes loading and validation of configuration"""

    def __init__(self, config_dir: Path = Path("conf")):
        self.config_dir = Path(config_dir)

    def load_analytics_config(self, profile: str = "default") -> DictConfig:
        """Loads the analytics configuration with validation"""
        config_path = self.config_dir / "analytics" / f"{profile}.yaml"

        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        cfg = OmegaConf.load(config_path)
        return self.validate(cfg)

    @staticmethod
    def validate(cfg: DictConfig) -> DictConfig:
        """
        Checks required keys and merges the config over the typed schema.
        """
        required_keys = ['observed_source', 'fetch_timeout_seconds', 'report']
        for key in required_keys:
            if key not in cfg:
                raise ConfigurationError(f"Missing required config key: {key}")

        try:
            merged = OmegaConf.merge(OmegaConf.structured(AnalyticsConfig), cfg)
        except OmegaConfBaseException as e:
            raise ConfigurationError(f"Invalid analytics config: {e}") from e

        if merged.observed_source.type not in VALID_SOURCE_TYPES:
            raise ConfigurationError(
                f"Unknown observed_source.type '{merged.observed_source.type}', "
                f"expected one of {VALID_SOURCE_TYPES}"
            )
        if merged.fetch_timeout_seconds <= 0:
            raise ConfigurationError("fetch_timeout_seconds must be positive")
        if merged.max_concurrent_fetches < 1:
            raise ConfigurationError("max_concurrent_fetches must be at least 1")
        return merged
