from sqlalchemy.orm import Session
from runai.models.profile import Profile
from runai.schemas.profile import OnboardingQuiz, ProfileUpdate

def get_profile_by_user_id(db: Session, user_id: int):
    """Get profile by user ID"""
    return db.query(Profile).filter(Profile.user_id == user_id).first()

def lock_profile(db: Session, user_id: int):
    """
    Row-lock the user's profile until the current transaction ends.
    Serializes plan activation per user on databases with SELECT ... FOR UPDATE
    (ignored by SQLite, which locks the whole database on write anyway).
    """
    return db.query(Profile).filter(Profile.user_id == user_id).with_for_update().first()

def apply_onboarding(db: Session, user_id: int, quiz: OnboardingQuiz):
    db_profile = get_profile_by_user_id(db, user_id)
    if not db_profile:
        db_profile = Profile(user_id=user_id)
        db.add(db_profile)

    for field, value in quiz.model_dump().items():
        setattr(db_profile, field, value)

    db.commit()
    db.refresh(db_profile)
    return db_profile

def update_profile(db: Session, user_id: int, profile_update: ProfileUpdate):
    db_profile = get_profile_by_user_id(db, user_id)
    if not db_profile:
        return None

    update_data = profile_update.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        if value is not None:
            setattr(db_profile, field, value)

    db.commit()
    db.refresh(db_profile)
    return db_profile
