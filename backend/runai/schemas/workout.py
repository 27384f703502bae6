from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, datetime

class WorkoutResponse(BaseModel):
    id: int
    user_id: int
    training_plan_id: Optional[int] = None
    workout_type: str
    planned_date: date

    planned_distance_km: Optional[float] = None
    planned_duration_minutes: Optional[int] = None
    planned_pace_per_km: Optional[str] = None
    effort_level: Optional[int] = None
    notes: Optional[str] = None

    actual_distance_km: Optional[float] = None
    actual_duration_minutes: Optional[int] = None
    actual_pace_per_km: Optional[str] = None
    completed_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class WorkoutCompletion(BaseModel):
    distance: float = Field(..., ge=0, description="Actual distance in km")
    duration: int = Field(..., ge=0, description="Actual duration in minutes")
    effort_level: int = Field(..., ge=1, le=10)
    notes: Optional[str] = Field(None, max_length=500)
