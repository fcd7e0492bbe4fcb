from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from klip.api.dependencies import get_current_user_optional
from klip.db import get_db
from klip.models.user import User
from klip.schemas.video import FeedPage
from klip.services.feed_service import FeedService

router = APIRouter(prefix="/feed", tags=["feed"])

@router.get("", response_model=FeedPage, response_model_exclude_none=True)
def get_page(
    limit: Optional[int] = Query(None, description="Page size, 1..100 (default 10)"),
    cursor: Optional[str] = Query(None, description="Id of the last video already seen"),
    viewer: Optional[User] = Depends(get_current_user_optional),
    db: Session = Depends(get_db)
):
    return FeedService(db).get_page(
        limit=limit,
        cursor=cursor,
        viewer_id=viewer.id if viewer else None,
    )
