import logging
from fastapi import APIRouter, Response, status
from fastapi.responses import JSONResponse
from langfuse import observe

from runai.schemas.coach import ChatRequest, ChatResponse
from runai.services.coach_service import get_coach_reply
from runai.services.llm_service import LLMServiceError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/functions/v1", tags=["AI Coach"])
AI_COACH_PATH = "/functions/v1/ai-coach"

@router.options("/ai-coach")
def ai_coach_preflight():
    return Response(status_code=status.HTTP_200_OK)

@router.post("/ai-coach", response_model=ChatResponse)
@observe(name="ai_coach", capture_input=False)
def chat_with_coach(request: ChatRequest):
    """
    Stateless chat coach. The client sends the message plus whatever profile
    and recent workouts it wants the coach to consider.
    """
    try:
        reply = get_coach_reply(request)
    except LLMServiceError as e:
        logger.error(f"[Chat API] Error in ai-coach function: {e}")
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": str(e)})
    except Exception as e:
        logger.exception(f"[Chat API] Unhandled error in ai-coach function: {e}")
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": "Internal server error"})

    return ChatResponse(response=reply)
