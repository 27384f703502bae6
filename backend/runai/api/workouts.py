from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import List

from runai.database import get_db
from runai.schemas.workout import WorkoutCompletion, WorkoutResponse
from runai.crud import workout as crud_workout
from runai.models.user import User
from runai.api.auth import get_current_user

router = APIRouter(prefix="/workouts", tags=["Workouts"])

@router.get("/recent", response_model=List[WorkoutResponse])
def read_recent_workouts(
    limit: int = Query(5, ge=1, le=50),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Latest workouts by planned date; the chat client forwards these as context."""
    return crud_workout.get_recent_workouts(db, current_user.id, limit=limit)

@router.post("/{workout_id}/complete", response_model=WorkoutResponse)
def complete_workout(
    workout_id: int,
    completion: WorkoutCompletion,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    workout = crud_workout.complete_workout(db, current_user.id, workout_id, completion)
    if workout is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Workout not found"
        )
    return workout
