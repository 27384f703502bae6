from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from runai.database import get_db
from runai.models.user import User
from runai.utils.utils import decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)

def get_user_from_token(token: Optional[str], db: Session) -> Optional[User]:
    """Resolves a bearer token to its user, or None when it is missing, invalid, expired or orphaned."""
    if not token:
        return None
    email = decode_access_token(token)
    if email is None:
        return None
    return db.query(User).filter(User.email == email).first()

def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db)
):
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Session expired. Please re-login.",
        headers={"WWW-Authenticate": "Bearer"},
    )
    token = credentials.credentials if credentials else None
    user = get_user_from_token(token, db)
    if user is None:
        raise credentials_exception
    return user
