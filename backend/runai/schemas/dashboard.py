from pydantic import BaseModel
from typing import Optional
from datetime import date

from runai.schemas.workout import WorkoutResponse

class RecoveryResponse(BaseModel):
    date: date
    recovery_score: Optional[float] = None
    hrv_score: Optional[float] = None
    sleep_quality: Optional[float] = None
    sleep_duration_hours: Optional[float] = None
    stress_level: Optional[float] = None

    class Config:
        from_attributes = True

class WeeklyProgress(BaseModel):
    week_start: date
    week_end: date
    completed_distance: float = 0.0
    target_distance: float = 0.0
    completed_workouts: int = 0
    target_workouts: int = 0

class DashboardResponse(BaseModel):
    todays_workout: Optional[WorkoutResponse] = None
    recovery: Optional[RecoveryResponse] = None
    weekly_progress: WeeklyProgress
