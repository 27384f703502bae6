import logging

from runai.schemas.coach import ChatRequest
from runai.services import llm_service
from runai.utils.llm_prompts.coach_prompts import build_coach_prompt

logger = logging.getLogger(__name__)

CHAT_TEMPERATURE = 0.7
CHAT_MAX_TOKENS = 500


def get_coach_reply(request: ChatRequest) -> str:
    """
    Chat coach: builds the style-conditioned system prompt from whatever
    context the client sent and returns the raw completion text.
    Nothing is read from or written to the database.
    """
    system_prompt = build_coach_prompt(
        coach_style=request.coach_style,
        profile=request.user_profile,
        recent_workouts=request.recent_workouts,
    )
    logger.info(
        f"[Coach] style={request.coach_style} profile={'yes' if request.user_profile else 'no'} "
        f"workouts={len(request.recent_workouts or [])}"
    )

    return llm_service.call_llm(
        system_prompt=system_prompt,
        user_prompt=request.message,
        model=llm_service.CHAT_MODEL_NAME,
        temperature=CHAT_TEMPERATURE,
        max_tokens=CHAT_MAX_TOKENS,
    )
