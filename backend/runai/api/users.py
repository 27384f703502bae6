from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from runai.database import get_db
from runai.schemas.user import UserCreate, UserResponse, UserSignupResponse
from runai.crud import user as crud_user
from runai.models.user import User
from runai.api.auth import get_current_user
from runai.utils.utils import create_access_token

router = APIRouter(prefix="/users", tags=["users"])

# POST - Signup (Create new user + profile + token)
@router.post("/signup", response_model=UserSignupResponse, status_code=status.HTTP_201_CREATED)
def signup(user: UserCreate, db: Session = Depends(get_db)):
    if crud_user.get_user_by_email(db, email=user.email):
        raise HTTPException(status_code=400, detail="Email already registered")

    new_user = crud_user.create_user(db=db, user=user)
    access_token = create_access_token(data={"sub": new_user.email})

    return {
        "user": new_user,
        "access_token": access_token,
        "token_type": "bearer"
    }

# GET - Get current user
@router.get("/me", response_model=UserResponse)
def read_me(current_user: User = Depends(get_current_user)):
    return current_user

# DELETE - Delete current user and everything they own
@router.delete("/me")
def delete_me(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    crud_user.delete_user(db, user_id=current_user.id)
    return {"message": "User deleted successfully"}
