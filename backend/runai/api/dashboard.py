from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from runai.database import get_db
from runai.schemas.dashboard import DashboardResponse
from runai.services.dashboard_service import get_dashboard
from runai.models.user import User
from runai.api.auth import get_current_user

router = APIRouter(tags=["Dashboard"])

@router.get("/dashboard", response_model=DashboardResponse)
def read_dashboard(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Today's workout, today's recovery, and progress for the current week."""
    return get_dashboard(db, current_user.id)
