from pydantic import BaseModel, Field
from typing import List, Optional, Union
import datetime

"""
Explicit optional-field records handed to the prompt builders.
Both the chat request body and ORM rows validate into these.
"""

class RunnerProfile(BaseModel):
    running_experience: Optional[str] = None
    race_goal: Optional[str] = None
    weekly_mileage_goal: Optional[float] = None
    preferred_coach_style: Optional[str] = None
    age: Optional[int] = None
    weight_kg: Optional[float] = None
    height_cm: Optional[float] = None

    class Config:
        from_attributes = True

class WorkoutSummary(BaseModel):
    workout_type: Optional[str] = None
    planned_date: Optional[Union[datetime.date, str]] = None
    planned_distance_km: Optional[float] = None
    planned_duration_minutes: Optional[float] = None
    actual_distance_km: Optional[float] = None
    actual_duration_minutes: Optional[float] = None
    effort_level: Optional[float] = None

    class Config:
        from_attributes = True

class RecoverySummary(BaseModel):
    date: Optional[Union[datetime.date, str]] = None
    recovery_score: Optional[float] = None
    sleep_quality: Optional[float] = None
    hrv_score: Optional[float] = None

    class Config:
        from_attributes = True

class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1)
    coach_style: Optional[str] = Field("supportive", alias="coachStyle")
    user_profile: Optional[RunnerProfile] = Field(None, alias="userProfile")
    recent_workouts: Optional[List[WorkoutSummary]] = Field(None, alias="recentWorkouts")

    class Config:
        populate_by_name = True

class ChatResponse(BaseModel):
    response: str
