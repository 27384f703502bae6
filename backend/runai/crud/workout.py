from sqlalchemy.orm import Session
from datetime import date, datetime
from typing import List
from runai.models.workout import Workout
from runai.schemas.workout import WorkoutCompletion

def get_recent_workouts(db: Session, user_id: int, limit: int = 10) -> List[Workout]:
    return db.query(Workout).filter(
        Workout.user_id == user_id
    ).order_by(Workout.planned_date.desc()).limit(limit).all()

def get_plan_workouts(db: Session, plan_id: int) -> List[Workout]:
    return db.query(Workout).filter(
        Workout.training_plan_id == plan_id
    ).order_by(Workout.planned_date.asc(), Workout.id.asc()).all()

def get_workouts_between(db: Session, user_id: int, start: date, end: date) -> List[Workout]:
    return db.query(Workout).filter(
        Workout.user_id == user_id,
        Workout.planned_date >= start,
        Workout.planned_date <= end
    ).all()

def get_workout_on(db: Session, user_id: int, day: date):
    return db.query(Workout).filter(
        Workout.user_id == user_id,
        Workout.planned_date == day
    ).order_by(Workout.id.asc()).first()

def complete_workout(db: Session, user_id: int, workout_id: int, completion: WorkoutCompletion):
    db_workout = db.query(Workout).filter(
        Workout.id == workout_id,
        Workout.user_id == user_id
    ).first()
    if not db_workout:
        return None

    db_workout.actual_distance_km = completion.distance
    db_workout.actual_duration_minutes = completion.duration
    db_workout.effort_level = completion.effort_level
    if completion.notes is not None:
        db_workout.notes = completion.notes
    db_workout.completed_at = datetime.utcnow()

    db.commit()
    db.refresh(db_workout)
    return db_workout
