from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

EXPERIENCE_PATTERN = "^(beginner|intermediate|advanced|professional)$"
RACE_GOAL_PATTERN = "^(fitness|5k|10k|half_marathon|marathon|ultra)$"
COACH_STYLE_PATTERN = "^(supportive|motivational|analytical|tough)$"


class OnboardingQuiz(BaseModel):
    """Answers collected by the four-step onboarding quiz."""
    running_experience: str = Field(
        ...,
        pattern=EXPERIENCE_PATTERN,
        description="beginner, intermediate, advanced, or professional"
    )
    race_goal: str = Field(
        ...,
        pattern=RACE_GOAL_PATTERN,
        description="fitness, 5k, 10k, half_marathon, marathon, or ultra"
    )
    weekly_mileage_goal: float = Field(10, gt=0, le=40, description="Weekly training time in hours")
    preferred_coach_style: str = Field(
        ...,
        pattern=COACH_STYLE_PATTERN,
        description="supportive, motivational, analytical, or tough"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "running_experience": "intermediate",
                "race_goal": "half_marathon",
                "weekly_mileage_goal": 6,
                "preferred_coach_style": "analytical"
            }
        }

class ProfileUpdate(BaseModel):
    display_name: Optional[str] = Field(None, max_length=100)
    age: Optional[int] = Field(None, gt=0, lt=120)
    weight_kg: Optional[float] = Field(None, gt=0, description="Current weight in kg")
    height_cm: Optional[float] = Field(None, gt=0, description="Height in cm")

class ProfileResponse(BaseModel):
    id: int
    user_id: int
    display_name: Optional[str] = None

    running_experience: Optional[str] = None
    race_goal: Optional[str] = None
    weekly_mileage_goal: Optional[float] = None
    preferred_coach_style: Optional[str] = None

    age: Optional[int] = None
    weight_kg: Optional[float] = None
    height_cm: Optional[float] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
