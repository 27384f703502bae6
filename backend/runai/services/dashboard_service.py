import logging
from datetime import date, timedelta
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from runai.crud import recovery_metric as crud_recovery
from runai.crud import training_plan as crud_training_plan
from runai.crud import workout as crud_workout
from runai.schemas.dashboard import DashboardResponse, RecoveryResponse, WeeklyProgress
from runai.schemas.training_plan import ActivePlanResponse, TrainingPlanResponse, PLAN_WEEKS
from runai.schemas.workout import WorkoutResponse

logger = logging.getLogger(__name__)


def week_bounds(today: date) -> Tuple[date, date]:
    """Sunday-to-Saturday week containing `today`."""
    days_since_sunday = (today.weekday() + 1) % 7
    week_start = today - timedelta(days=days_since_sunday)
    return week_start, week_start + timedelta(days=6)


def current_plan_week(start_date: date, today: date) -> int:
    days = (today - start_date).days
    return max(1, min(PLAN_WEEKS, days // 7 + 1))


def get_weekly_progress(db: Session, user_id: int, today: date) -> WeeklyProgress:
    week_start, week_end = week_bounds(today)
    workouts = crud_workout.get_workouts_between(db, user_id, week_start, week_end)
    completed = [w for w in workouts if w.completed_at]

    return WeeklyProgress(
        week_start=week_start,
        week_end=week_end,
        completed_distance=sum(w.actual_distance_km or 0 for w in completed),
        target_distance=sum(w.planned_distance_km or 0 for w in workouts),
        completed_workouts=len(completed),
        target_workouts=len(workouts),
    )


def get_dashboard(db: Session, user_id: int, today: Optional[date] = None) -> DashboardResponse:
    today = today or date.today()

    workout = crud_workout.get_workout_on(db, user_id, today)
    recovery = crud_recovery.get_metric_on(db, user_id, today)

    return DashboardResponse(
        todays_workout=WorkoutResponse.model_validate(workout) if workout else None,
        recovery=RecoveryResponse.model_validate(recovery) if recovery else None,
        weekly_progress=get_weekly_progress(db, user_id, today),
    )


def get_active_plan(db: Session, user_id: int, today: Optional[date] = None) -> Optional[ActivePlanResponse]:
    plan = crud_training_plan.get_active_plan(db, user_id)
    if plan is None:
        return None

    today = today or date.today()
    workouts = crud_workout.get_plan_workouts(db, plan.id)
    logger.debug(f"Active plan {plan.id} for user {user_id}: {len(workouts)} workouts")

    return ActivePlanResponse(
        plan=TrainingPlanResponse.model_validate(plan),
        current_week=current_plan_week(plan.start_date, today),
        workouts=[WorkoutResponse.model_validate(w) for w in workouts],
    )
