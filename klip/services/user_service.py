from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from klip.core.errors import Conflict, NotFound, Unauthorized
from klip.core.logging import logger
from klip.core.security import get_password_hash, verify_password
from klip.models.user import User
from klip.schemas.user import UserSignup


class UserService:
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: str) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_user_or_404(self, user_id: str) -> User:
        user = self.get_user(user_id)
        if not user:
            raise NotFound(f"User {user_id} not found")
        return user

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def signup(self, data: UserSignup) -> User:
        if self.get_user_by_email(data.email):
            raise Conflict("User with this email already exists")

        user = User(
            name=data.name,
            email=data.email,
            password_hash=get_password_hash(data.password),
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise Conflict("User with this email already exists")
        self.db.refresh(user)

        logger.info(f"Created user {user.id}")
        return user

    def authenticate(self, email: str, password: str) -> User:
        user = self.get_user_by_email(email)
        if not user or not user.password_hash or not verify_password(password, user.password_hash):
            raise Unauthorized("Incorrect email or password")
        return user
