from typing import List, Optional

from runai.schemas.coach import RunnerProfile, WorkoutSummary
from runai.utils.formatting import format_value, first_present

DEFAULT_COACH_STYLE = "supportive"

COACH_BASE_PROMPT = (
    "You are RunAI, an expert AI running coach. Your role is to provide personalized "
    "training advice, motivation, and guidance."
)

COACH_STYLE_DIRECTIVES = {
    "supportive": "Be encouraging, empathetic, and focus on positive reinforcement. Celebrate small wins and help build confidence.",
    "motivational": "Be energetic, inspiring, and push for excellence. Use motivational language and challenge the runner to reach their potential.",
    "analytical": "Be data-driven, precise, and technical. Provide detailed explanations and focus on metrics, pacing, and scientific training principles.",
    "tough": "Be direct, no-nonsense, and demanding. Push hard while maintaining respect. Focus on discipline and mental toughness.",
}

COACH_PROFILE_BLOCK = """

Runner Profile:
- Experience: {experience}
- Weekly training goal: {weekly_goal}
- Race goal: {race_goal}
- Weight: {weight}
- Age: {age}"""

COACH_WORKOUT_LINE = "\n{index}. {workout_type} - {distance}km in {duration} minutes (Effort: {effort}/10)"

COACH_CLOSING_INSTRUCTION = (
    "\n\nProvide helpful, actionable advice. Keep responses concise but informative. "
    "Always consider the runner's current fitness level and goals."
)


def style_directive(coach_style: Optional[str]) -> str:
    return COACH_STYLE_DIRECTIVES.get(coach_style or "", COACH_STYLE_DIRECTIVES[DEFAULT_COACH_STYLE])


def render_runner_profile(profile: RunnerProfile) -> str:
    weekly = format_value(profile.weekly_mileage_goal, "Not set")
    weight = format_value(profile.weight_kg, "Not provided")
    return COACH_PROFILE_BLOCK.format(
        experience=format_value(profile.running_experience, "Unknown"),
        weekly_goal=weekly if weekly == "Not set" else f"{weekly} hours",
        race_goal=format_value(profile.race_goal, "General fitness"),
        weight=weight if weight == "Not provided" else f"{weight} kg",
        age=format_value(profile.age, "Not provided"),
    )


def render_recent_workouts(workouts: List[WorkoutSummary]) -> str:
    lines = "\n\nRecent Workouts:"
    for index, workout in enumerate(workouts, start=1):
        lines += COACH_WORKOUT_LINE.format(
            index=index,
            workout_type=format_value(workout.workout_type, "workout"),
            distance=format_value(first_present(workout.actual_distance_km, workout.planned_distance_km), "N/A"),
            duration=format_value(first_present(workout.actual_duration_minutes, workout.planned_duration_minutes), "N/A"),
            effort=format_value(workout.effort_level, "N/A"),
        )
    return lines


def build_coach_prompt(
    coach_style: Optional[str],
    profile: Optional[RunnerProfile] = None,
    recent_workouts: Optional[List[WorkoutSummary]] = None,
) -> str:
    prompt = COACH_BASE_PROMPT + " " + style_directive(coach_style)

    if profile is not None:
        prompt += render_runner_profile(profile)

    if recent_workouts:
        prompt += render_recent_workouts(recent_workouts)

    return prompt + COACH_CLOSING_INSTRUCTION
