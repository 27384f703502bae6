from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from runai.database import get_db
from runai.crud import user as crud_user
from runai.schemas.user import UserLogin, TokenResponse
from runai.utils.utils import verify_password, create_access_token

router = APIRouter(tags=["login"])

@router.post("/login/json", response_model=TokenResponse)
def login_json(login_data: UserLogin, db: Session = Depends(get_db)):
    """
    JSON login. The returned token goes in `Authorization: Bearer <token>`.
    """
    user = crud_user.get_user_by_email(db, email=login_data.email)
    if not user or not verify_password(login_data.password, user.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(data={"sub": user.email})
    return {"access_token": access_token, "token_type": "bearer", "user_id": user.id}
