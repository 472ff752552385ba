from sqlalchemy import Column, Integer, String, Float, Date
from .database import Base

class TrafficHistoryDB(Base):
    __tablename__ = "traffic_history"

    id = Column(Integer, primary_key=True, autoincrement=True)
    asset_id = Column(String, nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    hour = Column(Integer, nullable=False)
    timestamp = Column(String, nullable=True)
    traffic_volume = Column(Integer, nullable=False)
    congestion_level = Column(String, nullable=False)
    average_speed = Column(Float, nullable=False)
    raw_duration = Column(Integer, nullable=True)
    raw_static_duration = Column(Integer, nullable=True)
    source = Column(String, nullable=False, default="routes-api")
