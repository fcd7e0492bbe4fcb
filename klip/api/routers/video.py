from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from klip.api.dependencies import get_current_user
from klip.db import get_db
from klip.models.user import User
from klip.schemas.video import ToggleLikeRequest, ToggleLikeResult, VideoCreate, VideoView
from klip.services.like_service import LikeService
from klip.services.video_service import VideoService

router = APIRouter(prefix="/video", tags=["video"])

@router.post("", response_model=VideoView, status_code=status.HTTP_201_CREATED,
             response_model_exclude_none=True)
def create_video(
    video: VideoCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return VideoService(db).create_video(current_user, video)

@router.post("/toggle-like", response_model=ToggleLikeResult)
def toggle_like(
    request: ToggleLikeRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return LikeService(db).toggle_like(current_user.id, request.video_id)
