from .database import DATABASE_URL, Base, create_session_factory, init_db
from .models import TrafficHistoryDB

__all__ = [
    "DATABASE_URL", "Base", "create_session_factory", "init_db",
    "TrafficHistoryDB",
]
