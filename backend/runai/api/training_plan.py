import logging
from typing import Optional
from fastapi import APIRouter, Depends, Header, HTTPException, Response, status
from fastapi.responses import JSONResponse
from langfuse import observe
from sqlalchemy.orm import Session

from runai.database import get_db
from runai.models.user import User
from runai.api.auth import get_current_user, get_user_from_token
from runai.schemas.training_plan import ActivePlanResponse, PlanGenerationResponse
from runai.services.dashboard_service import get_active_plan
from runai.services.plan_service import PlanGenerationError, generate_training_plan
from runai.utils.utils import strip_bearer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Training Plans"])
GENERATE_PLAN_PATH = "/functions/v1/generate-training-plan"

@router.options(GENERATE_PLAN_PATH)
def generate_plan_preflight():
    return Response(status_code=status.HTTP_200_OK)

@router.post(GENERATE_PLAN_PATH, response_model=PlanGenerationResponse)
@observe(name="generate_training_plan", capture_input=False)
def generate_plan_endpoint(
    authorization: Optional[str] = Header(None),
    db: Session = Depends(get_db)
):
    """
    Generate a new 4-week plan for the bearer of the token and make it the
    user's only active plan. Errors come back as {"success": false, "error"}.
    """
    try:
        if not authorization:
            raise PlanGenerationError("No authorization header")

        user = get_user_from_token(strip_bearer(authorization), db)
        if user is None:
            raise PlanGenerationError("User not authenticated")

        return generate_training_plan(db, user.id)

    except PlanGenerationError as e:
        logger.error(f"Error in generate-training-plan function: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": str(e)}
        )
    except Exception as e:
        logger.exception(f"Unhandled error in generate-training-plan function: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": "Internal server error"}
        )

@router.get("/training-plans/active", response_model=ActivePlanResponse)
def read_active_plan(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    active = get_active_plan(db, current_user.id)
    if active is None:
        raise HTTPException(status_code=404, detail="No active training plan")
    return active
