from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from klip.api.dependencies import get_current_user_optional
from klip.db import get_db
from klip.models.user import User
from klip.schemas.user import UserProfile
from klip.schemas.video import FeedPage
from klip.services.feed_service import FeedService
from klip.services.user_service import UserService
from klip.services.video_service import VideoService

router = APIRouter(prefix="/users", tags=["users"])

@router.get("/{user_id}", response_model=UserProfile, response_model_exclude_none=True)
def get_profile(user_id: str, db: Session = Depends(get_db)):
    user = UserService(db).get_user_or_404(user_id)
    return UserProfile(
        id=user.id,
        name=user.name,
        image=user.image,
        video_count=VideoService(db).count_videos_by_user(user.id),
    )

@router.get("/{user_id}/videos", response_model=FeedPage, response_model_exclude_none=True)
def get_user_videos(
    user_id: str,
    limit: Optional[int] = Query(None),
    cursor: Optional[str] = Query(None),
    viewer: Optional[User] = Depends(get_current_user_optional),
    db: Session = Depends(get_db)
):
    user = UserService(db).get_user_or_404(user_id)
    return FeedService(db).get_page(
        limit=limit,
        cursor=cursor,
        viewer_id=viewer.id if viewer else None,
        author_id=user.id,
    )
