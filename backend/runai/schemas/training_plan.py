from pydantic import BaseModel, Field, field_validator
from typing import List, Literal, Optional, Dict, Any
from datetime import date, datetime

from runai.schemas.workout import WorkoutResponse

WorkoutType = Literal["easy_run", "tempo", "intervals", "long_run", "cross_training", "rest"]
DifficultyLevel = Literal["beginner", "intermediate", "advanced", "professional"]

PLAN_WEEKS = 4

# workouts.notes is String(500); "Week N: <focus>" is the notes fallback
NOTES_MAX_LENGTH = 500
FOCUS_MAX_LENGTH = 480

# --- Structured LLM output ---

class PlannedWorkout(BaseModel):
    day: int = Field(..., ge=1, le=7)
    workout_type: WorkoutType
    planned_distance_km: Optional[float] = Field(None, ge=0)
    planned_duration_minutes: Optional[float] = Field(None, ge=0)
    effort_level: int = Field(..., ge=1, le=10)
    notes: Optional[str] = Field(None, max_length=NOTES_MAX_LENGTH)

class PlanWeek(BaseModel):
    week: int
    focus: str = Field(..., max_length=FOCUS_MAX_LENGTH)
    workouts: List[PlannedWorkout]

class GeneratedPlan(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    difficulty_level: DifficultyLevel
    weeks: List[PlanWeek]

    @field_validator("weeks")
    @classmethod
    def check_weeks(cls, weeks: List[PlanWeek]) -> List[PlanWeek]:
        if len(weeks) != PLAN_WEEKS:
            raise ValueError(f"expected {PLAN_WEEKS} weeks, got {len(weeks)}")
        for index, week in enumerate(weeks):
            if week.week != index + 1:
                raise ValueError(f"week {index + 1} is numbered {week.week}")
        return weeks

# --- API ---

class TrainingPlanResponse(BaseModel):
    id: int
    user_id: int
    name: str
    goal: str
    difficulty_level: Optional[str] = None
    weekly_mileage: Optional[float] = None
    start_date: date
    end_date: Optional[date] = None
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class PlanGenerationResponse(BaseModel):
    success: bool = True
    plan: TrainingPlanResponse
    workoutsCreated: int
    planData: Dict[str, Any]

class ActivePlanResponse(BaseModel):
    plan: TrainingPlanResponse
    current_week: int
    workouts: List[WorkoutResponse]
