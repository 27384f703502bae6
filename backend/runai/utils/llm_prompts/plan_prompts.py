from typing import List, Optional

from runai.schemas.coach import RunnerProfile, WorkoutSummary, RecoverySummary
from runai.utils.formatting import format_value, first_present

MAX_PROMPT_WORKOUTS = 10
MAX_PROMPT_RECOVERY_DAYS = 7

NO_WORKOUTS_LINE = "- No previous workouts recorded"
NO_RECOVERY_LINE = "- No recovery data available"

PLAN_USER_PROMPT = "Generate my personalized training plan now."

PLAN_SYSTEM_PROMPT = """You are RunAI, a world-class running coach AI. Generate a personalized 4-week training plan based on the user's assessment and running history.

User Assessment Results:
- Running Experience: {running_experience}
- Race Goal: {race_goal}
- Weekly Training Hours: {weekly_hours}
- Preferred Coach Style: {coach_style}
- Age: {age}
- Weight: {weight}
- Height: {height}

Recent Workout History (last 10 workouts):
{workout_history}

Recent Recovery Data (last 7 days):
{recovery_history}

Generate a structured training plan with:
1. Plan name and description
2. Weekly breakdown (4 weeks)
3. Specific workouts for each week with: type, distance, duration, pace guidance, effort level
4. Progressive difficulty based on experience level
5. Recovery recommendations
6. Goal-specific focus areas

RULES:
- Exactly 4 entries in "weeks", numbered 1 to 4 in order.
- "day" is the day of the week, 1 to 7.
- "effort_level" is 1 to 10.
- "workout_type" is one of: easy_run, tempo, intervals, long_run, cross_training, rest.
- "difficulty_level" is one of: beginner, intermediate, advanced, professional.
- Respond with JSON only.

Format as JSON with this structure:
{{
  "name": "Plan Name",
  "description": "Brief description",
  "difficulty_level": "beginner/intermediate/advanced/professional",
  "weeks": [
    {{
      "week": 1,
      "focus": "Week focus description",
      "workouts": [
        {{
          "day": 1,
          "workout_type": "easy_run/tempo/intervals/long_run/rest/cross_training",
          "planned_distance_km": 5.0,
          "planned_duration_minutes": 30,
          "effort_level": 6,
          "notes": "Specific instructions"
        }}
      ]
    }}
  ]
}}"""

NOT_SPECIFIED = "Not specified"


def _with_unit(value: Optional[float], unit: str) -> str:
    rendered = format_value(value, NOT_SPECIFIED)
    return rendered if rendered == NOT_SPECIFIED else f"{rendered} {unit}"


def render_workout_history(workouts: List[WorkoutSummary]) -> str:
    if not workouts:
        return NO_WORKOUTS_LINE
    lines = []
    for w in workouts[:MAX_PROMPT_WORKOUTS]:
        distance = format_value(first_present(w.actual_distance_km, w.planned_distance_km), "N/A")
        duration = format_value(first_present(w.actual_duration_minutes, w.planned_duration_minutes), "N/A")
        lines.append(
            f"- {format_value(w.workout_type, 'workout')} on {format_value(w.planned_date, 'N/A')}: "
            f"{distance}km in {duration} mins, effort: {format_value(w.effort_level, 'N/A')}/10"
        )
    return "\n".join(lines)


def render_recovery_history(metrics: List[RecoverySummary]) -> str:
    if not metrics:
        return NO_RECOVERY_LINE
    lines = []
    for r in metrics[:MAX_PROMPT_RECOVERY_DAYS]:
        lines.append(
            f"- {format_value(r.date, 'N/A')}: Recovery score {format_value(r.recovery_score, 'N/A')}/100, "
            f"Sleep quality {format_value(r.sleep_quality, 'N/A')}/10, HRV {format_value(r.hrv_score, 'N/A')}"
        )
    return "\n".join(lines)


def build_plan_prompt(
    profile: RunnerProfile,
    workouts: List[WorkoutSummary],
    recovery: List[RecoverySummary],
) -> str:
    return PLAN_SYSTEM_PROMPT.format(
        running_experience=format_value(profile.running_experience, NOT_SPECIFIED),
        race_goal=format_value(profile.race_goal, NOT_SPECIFIED),
        weekly_hours=format_value(profile.weekly_mileage_goal, NOT_SPECIFIED),
        coach_style=format_value(profile.preferred_coach_style, NOT_SPECIFIED),
        age=format_value(profile.age, NOT_SPECIFIED),
        weight=_with_unit(profile.weight_kg, "kg"),
        height=_with_unit(profile.height_cm, "cm"),
        workout_history=render_workout_history(workouts),
        recovery_history=render_recovery_history(recovery),
    )
