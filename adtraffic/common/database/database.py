import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

# Default to a local sqlite file if not specified
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    "sqlite:///data/adtraffic.db"
)

Base = declarative_base()

def create_session_factory(database_url: str = DATABASE_URL) -> sessionmaker:
    """Creates an engine and a session factory bound to it."""
    engine = create_engine(database_url, pool_pre_ping=True)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)

def init_db(session_factory: sessionmaker):
    """Initialize database tables."""
    # Import models here to ensure they are registered with Base
    from . import models
    Base.metadata.create_all(bind=session_factory.kw["bind"])
