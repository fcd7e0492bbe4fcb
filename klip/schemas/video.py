from datetime import datetime
from typing import List, Optional

from pydantic import Field

from klip.schemas.base import CamelModel
from klip.schemas.user import UserPublic

class VideoCreate(CamelModel):
    title: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)
    description: Optional[str] = None

class VideoView(CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    url: str
    created_at: datetime
    user: UserPublic
    like_count: int = 0
    is_liked: bool = False

class FeedPage(CamelModel):
    items: List[VideoView]
    next_cursor: Optional[str] = None

class ToggleLikeRequest(CamelModel):
    video_id: str = Field(..., min_length=1)

class ToggleLikeResult(CamelModel):
    is_liked: bool
