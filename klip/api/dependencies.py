from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from klip.core.errors import Unauthorized
from klip.core.security import decode_access_token
from klip.db import get_db
from klip.models.user import User
from klip.services.user_service import UserService

security_optional = HTTPBearer(auto_error=False)


def get_current_user_optional(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_optional),
    db: Session = Depends(get_db),
) -> Optional[User]:
    """Resolve the viewer from a bearer token; anything unusable means anonymous."""
    if not credentials:
        return None
    user_id = decode_access_token(credentials.credentials)
    if user_id is None:
        return None
    return UserService(db).get_user(user_id)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_optional),
    db: Session = Depends(get_db),
) -> User:
    if not credentials:
        raise Unauthorized("Authentication required")
    user_id = decode_access_token(credentials.credentials)
    if user_id is None:
        raise Unauthorized("Could not validate credentials")
    user = UserService(db).get_user(user_id)
    if user is None:
        raise Unauthorized("Could not validate credentials")
    return user
