from sqlalchemy import Column, Integer, Float, String, DateTime, ForeignKey, JSON
from sqlalchemy.dialects.postgresql import JSONB
from datetime import datetime
from runai.database import Base

class WearableData(Base):
    __tablename__ = "wearable_data"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    device_type = Column(String(20), nullable=False)  # "garmin", "apple_watch", "whoop", "oura", "polar", "fitbit"
    data_type = Column(String(50), nullable=False)    # e.g. "heart_rate", "recovery"
    value = Column(Float, nullable=False)
    unit = Column(String(20), nullable=False)

    recorded_at = Column(DateTime, nullable=False, index=True)
    synced_at = Column(DateTime, default=datetime.utcnow)
    # "metadata" is reserved on declarative classes
    extra = Column("metadata", JSON().with_variant(JSONB, "postgresql"))
