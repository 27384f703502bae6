from sqlalchemy import Column, Integer, Float, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from runai.database import Base

class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    display_name = Column(String(100))

    # Onboarding quiz answers
    running_experience = Column(String(20))     # "beginner", "intermediate", "advanced", "professional"
    race_goal = Column(String(20))              # "fitness", "5k", "10k", "half_marathon", "marathon", "ultra"
    weekly_mileage_goal = Column(Float)         # Weekly training time goal in hours
    preferred_coach_style = Column(String(20))  # "supportive", "motivational", "analytical", "tough"

    # Physical info
    age = Column(Integer)
    weight_kg = Column(Float)
    height_cm = Column(Float)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("User", back_populates="profile")
