"""
Observed traffic sources and the factory that builds them from config.
"""
from omegaconf import DictConfig
from .sources import NullObservedTrafficSource, InMemoryObservedTrafficSource
from .repositories import CSVTrafficHistoryRepository, SQLTrafficHistoryRepository
from ..domain.protocols import ObservedTrafficSource
from ...common.database import create_session_factory, init_db
from ...common.exceptions import ConfigurationError

def create_observed_source(source_config: DictConfig) -> ObservedTrafficSource:
    """
    Builds the observed traffic source named by observed_source.type.
    """
    source_type = source_config.get('type', 'none')

    if source_type == 'none':
        return NullObservedTrafficSource()
    if source_type == 'csv':
        return CSVTrafficHistoryRepository(output_dir=source_config.csv_dir)
    if source_type == 'sql':
        session_factory = create_session_factory(source_config.database_url)
        init_db(session_factory)
        return SQLTrafficHistoryRepository(session_factory)

    raise ConfigurationError(f"No observed source for type: {source_type}")
