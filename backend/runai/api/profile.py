from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from runai.database import get_db
from runai.schemas.profile import OnboardingQuiz, ProfileResponse, ProfileUpdate
from runai.crud import profile as crud_profile
from runai.models.user import User
from runai.api.auth import get_current_user

router = APIRouter(prefix="/profiles", tags=["profiles"])

# GET - Get profile for current user
@router.get("/me", response_model=ProfileResponse)
def read_my_profile(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    db_profile = crud_profile.get_profile_by_user_id(db, user_id=current_user.id)
    if db_profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile not found"
        )
    return db_profile

# PATCH - Update physical info
@router.patch("/me", response_model=ProfileResponse)
def update_my_profile(
    profile_update: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    db_profile = crud_profile.update_profile(db, current_user.id, profile_update)
    if db_profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile not found"
        )
    return db_profile

# PUT - Save onboarding quiz answers
@router.put("/me/onboarding", response_model=ProfileResponse)
def submit_onboarding(
    quiz: OnboardingQuiz,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Stores the quiz answers (experience, race goal, weekly hours, coach style)
    on the current user's profile.
    """
    return crud_profile.apply_onboarding(db, current_user.id, quiz)
