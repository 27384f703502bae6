from sqlalchemy import Column, Integer, Float, String, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from runai.database import Base

class Workout(Base):
    __tablename__ = "workouts"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    training_plan_id = Column(Integer, ForeignKey("training_plans.id", ondelete="SET NULL"), nullable=True, index=True)

    workout_type = Column(String(20), nullable=False)  # "easy_run", "tempo", "intervals", "long_run", "cross_training", "rest"
    planned_date = Column(Date, nullable=False, index=True)

    # Plan
    planned_distance_km = Column(Float)
    planned_duration_minutes = Column(Integer)
    planned_pace_per_km = Column(String(10))  # e.g. "5:30"
    effort_level = Column(Integer)            # 1-10
    notes = Column(String(500))

    # Completion (set by the complete-workout action)
    actual_distance_km = Column(Float)
    actual_duration_minutes = Column(Integer)
    actual_pace_per_km = Column(String(10))
    completed_at = Column(DateTime)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    training_plan = relationship("TrainingPlan", back_populates="workouts")
