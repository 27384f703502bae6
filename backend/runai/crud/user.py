from sqlalchemy.orm import Session
from runai.models.user import User
from runai.models.profile import Profile
from runai.schemas.user import UserCreate
from runai.utils.utils import hash_password

def get_user_by_email(db: Session, email: str):
    return db.query(User).filter(User.email == email).first()

def create_user(db: Session, user: UserCreate):
    """Creates the user together with the empty profile the onboarding quiz fills in."""
    db_user = User(
        name=user.name,
        email=user.email,
        password=hash_password(user.password),
    )
    db.add(db_user)
    db.flush()

    db.add(Profile(user_id=db_user.id, display_name=user.name))
    db.commit()
    db.refresh(db_user)
    return db_user

def delete_user(db: Session, user_id: int):
    db_user = db.query(User).filter(User.id == user_id).first()
    if db_user:
        db.delete(db_user)
        db.commit()
    return db_user
