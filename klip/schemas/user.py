from pydantic import BaseModel, EmailStr, Field
from typing import Optional

from klip.schemas.base import CamelModel

class UserSignup(CamelModel):
    name: str = Field(..., min_length=2)
    email: EmailStr
    password: str = Field(..., min_length=6)

class UserLogin(CamelModel):
    email: EmailStr
    password: str

class UserResponse(CamelModel):
    id: str
    name: str
    email: EmailStr

class UserPublic(CamelModel):
    id: str
    name: str
    image: Optional[str] = None

class UserProfile(UserPublic):
    video_count: int

class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
