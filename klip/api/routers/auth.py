from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from klip.api.dependencies import get_current_user
from klip.core.logging import logger
from klip.core.security import create_access_token
from klip.db import get_db
from klip.models.user import User
from klip.schemas.user import Token, UserLogin, UserPublic, UserResponse, UserSignup
from klip.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def signup(user: UserSignup, db: Session = Depends(get_db)):
    logger.info("Signup requested")
    return UserService(db).signup(user)

@router.post("/login", response_model=Token)
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    user = UserService(db).authenticate(credentials.email, credentials.password)
    logger.info(f"User {user.id} logged in")
    return Token(access_token=create_access_token({"sub": user.id}))

@router.get("/me", response_model=UserPublic, response_model_exclude_none=True)
def me(current_user: User = Depends(get_current_user)):
    return current_user
