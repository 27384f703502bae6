from sqlalchemy import Column, Integer, Float, Date, DateTime, ForeignKey, UniqueConstraint
from datetime import datetime
from runai.database import Base

class RecoveryMetric(Base):
    __tablename__ = "recovery_metrics"
    __table_args__ = (UniqueConstraint("user_id", "date", name="uq_recovery_metrics_user_date"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(Date, nullable=False)

    recovery_score = Column(Float)        # 0-100 composite
    hrv_score = Column(Float)
    sleep_quality = Column(Float)         # 1-10
    sleep_duration_hours = Column(Float)
    stress_level = Column(Float)

    created_at = Column(DateTime, default=datetime.utcnow)
