import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import List, Optional

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from runai.crud import profile as crud_profile
from runai.crud import recovery_metric as crud_recovery
from runai.crud import training_plan as crud_training_plan
from runai.crud import workout as crud_workout
from runai.models.training_plan import TrainingPlan
from runai.models.workout import Workout
from runai.schemas.coach import RunnerProfile, WorkoutSummary, RecoverySummary
from runai.schemas.training_plan import GeneratedPlan, PlanGenerationResponse, TrainingPlanResponse
from runai.services import llm_service
from runai.utils.llm_prompts.plan_prompts import (
    MAX_PROMPT_WORKOUTS,
    MAX_PROMPT_RECOVERY_DAYS,
    PLAN_USER_PROMPT,
    build_plan_prompt,
)

logger = logging.getLogger(__name__)

"""
Plan Service
------------
Generates a 4-week training plan for one user.
1. Loads profile (required), recent workouts and recovery metrics (optional).
2. Builds the structured-output prompt.
3. Calls the LLM in JSON mode.
4. Validates the reply against GeneratedPlan.
5. Derives a calendar date for every planned workout.
6. Inserts the plan and deactivates the user's other plans in one transaction.
7. Bulk inserts the workouts.
Every fatal step raises PlanGenerationError carrying the client-facing message.
"""

PLAN_LENGTH_DAYS = 28
DEFAULT_GOAL = "fitness"
DEFAULT_WEEKLY_MILEAGE = 10
PLAN_TEMPERATURE = 0.7
PLAN_MAX_TOKENS = 2000


class PlanGenerationError(Exception):
    """A fatal plan-generation step. str(error) is safe to show the user."""


@dataclass
class PlanContext:
    profile: RunnerProfile
    workouts: List[WorkoutSummary] = field(default_factory=list)
    recovery: List[RecoverySummary] = field(default_factory=list)


def load_plan_context(db: Session, user_id: int) -> PlanContext:
    try:
        profile = crud_profile.get_profile_by_user_id(db, user_id)
    except SQLAlchemyError as e:
        logger.error(f"Profile error for user {user_id}: {e}")
        db.rollback()
        raise PlanGenerationError("Could not fetch user profile") from e
    if profile is None:
        logger.error(f"Profile error: no profile for user {user_id}")
        raise PlanGenerationError("Could not fetch user profile")

    context = PlanContext(profile=RunnerProfile.model_validate(profile))

    try:
        rows = crud_workout.get_recent_workouts(db, user_id, limit=MAX_PROMPT_WORKOUTS)
        context.workouts = [WorkoutSummary.model_validate(w) for w in rows]
    except SQLAlchemyError as e:
        logger.error(f"Workouts error for user {user_id}: {e}")
        db.rollback()

    try:
        rows = crud_recovery.get_recent_metrics(db, user_id, limit=MAX_PROMPT_RECOVERY_DAYS)
        context.recovery = [RecoverySummary.model_validate(r) for r in rows]
    except SQLAlchemyError as e:
        logger.error(f"Recovery metrics error for user {user_id}: {e}")
        db.rollback()

    return context


def parse_generated_plan(content: str) -> GeneratedPlan:
    """Strict parse: malformed JSON or a shape violation rejects the whole reply."""
    try:
        return GeneratedPlan.model_validate_json(content)
    except ValidationError as e:
        logger.error(f"Failed to parse AI response: {e}")
        raise PlanGenerationError("Invalid AI response format") from e


def plan_end_date(start_date: date) -> date:
    return start_date + timedelta(days=PLAN_LENGTH_DAYS)


def workout_date(start_date: date, week_index: int, day: int) -> date:
    """`week_index` is 0-based, `day` is 1-7."""
    return start_date + timedelta(days=week_index * 7 + (day - 1))


def _whole_minutes(minutes: Optional[float]) -> Optional[int]:
    return None if minutes is None else int(round(minutes))


def build_workout_rows(plan_data: GeneratedPlan, user_id: int, plan_id: Optional[int], start_date: date) -> List[Workout]:
    rows = []
    for week_index, week in enumerate(plan_data.weeks):
        for planned in week.workouts:
            rows.append(Workout(
                user_id=user_id,
                training_plan_id=plan_id,
                workout_type=planned.workout_type,
                planned_date=workout_date(start_date, week_index, planned.day),
                planned_distance_km=planned.planned_distance_km,
                planned_duration_minutes=_whole_minutes(planned.planned_duration_minutes),
                effort_level=planned.effort_level,
                notes=planned.notes or f"Week {week.week}: {week.focus}",
            ))
    return rows


def _activate_new_plan(db: Session, user_id: int, profile: RunnerProfile, plan_data: GeneratedPlan, start_date: date) -> TrainingPlan:
    try:
        crud_profile.lock_profile(db, user_id)

        new_plan = TrainingPlan(
            user_id=user_id,
            name=plan_data.name,
            goal=profile.race_goal or DEFAULT_GOAL,
            difficulty_level=plan_data.difficulty_level,
            weekly_mileage=profile.weekly_mileage_goal or DEFAULT_WEEKLY_MILEAGE,
            start_date=start_date,
            end_date=plan_end_date(start_date),
            is_active=True,
        )
        db.add(new_plan)
        db.flush()

        deactivated = crud_training_plan.deactivate_other_plans(db, user_id, new_plan.id)
        db.commit()
    except SQLAlchemyError as e:
        logger.error(f"Plan creation error for user {user_id}: {e}")
        db.rollback()
        raise PlanGenerationError("Could not create training plan") from e

    db.refresh(new_plan)
    logger.info(f"Activated plan {new_plan.id} for user {user_id}, deactivated {deactivated} previous plan(s)")
    return new_plan


def generate_training_plan(db: Session, user_id: int, today: Optional[date] = None) -> PlanGenerationResponse:
    logger.info(f"Generating training plan for user: {user_id}")

    context = load_plan_context(db, user_id)
    # Release the read transaction before the slow LLM call
    db.rollback()
    system_prompt = build_plan_prompt(context.profile, context.workouts, context.recovery)

    try:
        content = llm_service.call_llm(
            system_prompt=system_prompt,
            user_prompt=PLAN_USER_PROMPT,
            model=llm_service.PLAN_MODEL_NAME,
            temperature=PLAN_TEMPERATURE,
            max_tokens=PLAN_MAX_TOKENS,
            json_mode=True,
        )
    except llm_service.LLMServiceError as e:
        raise PlanGenerationError(str(e)) from e

    logger.debug(f"AI generated plan: {content}")
    plan_data = parse_generated_plan(content)

    start_date = today or date.today()
    new_plan = _activate_new_plan(db, user_id, context.profile, plan_data, start_date)

    workouts = build_workout_rows(plan_data, user_id, new_plan.id, start_date)
    try:
        db.add_all(workouts)
        db.commit()
    except SQLAlchemyError as e:
        # The plan stays committed and active; the user can regenerate.
        logger.error(f"Workouts creation error for plan {new_plan.id}: {e}")
        db.rollback()
        raise PlanGenerationError("Could not create workout schedule") from e

    logger.info(f"Created training plan with {len(workouts)} workouts")

    return PlanGenerationResponse(
        success=True,
        plan=TrainingPlanResponse.model_validate(new_plan),
        workoutsCreated=len(workouts),
        planData=plan_data.model_dump(mode="json"),
    )
