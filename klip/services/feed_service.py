import uuid
from typing import Optional

from sqlalchemy import and_, exists, false, func, or_, select
from sqlalchemy.orm import Session, aliased, selectinload

from klip.core.config import get_settings
from klip.core.errors import InvalidInput
from klip.core.logging import logger
from klip.models.like import Like
from klip.models.video import Video
from klip.schemas.user import UserPublic
from klip.schemas.video import FeedPage, VideoView

settings = get_settings()


class FeedService:
    """Reverse-chronological feed with keyset pagination.

    Videos are totally ordered by (created_at desc, id desc). A cursor is the
    id of the last video the caller has seen; the next page starts strictly
    after that row, so inserts of newer videos and deletes of already returned
    ones never shift the window.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_page(
        self,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        viewer_id: Optional[str] = None,
        author_id: Optional[str] = None,
    ) -> FeedPage:
        limit = self._check_limit(limit)
        self._check_cursor(cursor)

        query = self._annotated_query(viewer_id)
        if author_id is not None:
            query = query.filter(Video.user_id == author_id)

        if cursor is not None:
            if not self.db.query(exists().where(Video.id == cursor)).scalar():
                logger.info(f"Feed cursor {cursor} does not match any video, returning empty page")
                return FeedPage(items=[])
            query = query.filter(self._after_cursor(cursor))

        rows = (
            query.order_by(Video.created_at.desc(), Video.id.desc())
            .limit(limit + 1)
            .all()
        )

        next_cursor = None
        if len(rows) > limit:
            rows = rows[:limit]
            next_cursor = rows[-1][0].id

        items = [self._to_view(video, like_count, is_liked) for video, like_count, is_liked in rows]
        return FeedPage(items=items, next_cursor=next_cursor)

    def _annotated_query(self, viewer_id: Optional[str]):
        like_count = (
            select(func.count(Like.id))
            .where(Like.video_id == Video.id)
            .correlate(Video)
            .scalar_subquery()
        )
        if viewer_id is not None:
            is_liked = exists().where(
                and_(Like.video_id == Video.id, Like.user_id == viewer_id)
            ).correlate(Video)
        else:
            is_liked = false()

        return self.db.query(
            Video,
            like_count.label("like_count"),
            is_liked.label("is_liked"),
        ).options(selectinload(Video.user))

    @staticmethod
    def _after_cursor(cursor: str):
        # compare against the stored row so timestamps never round-trip through Python
        cursor_video = aliased(Video)
        cursor_created_at = (
            select(cursor_video.created_at)
            .where(cursor_video.id == cursor)
            .scalar_subquery()
        )
        return or_(
            Video.created_at < cursor_created_at,
            and_(Video.created_at == cursor_created_at, Video.id < cursor),
        )

    @staticmethod
    def _check_limit(limit: Optional[int]) -> int:
        if limit is None:
            return settings.FEED_DEFAULT_LIMIT
        if limit < 1 or limit > settings.FEED_MAX_LIMIT:
            raise InvalidInput(f"limit must be between 1 and {settings.FEED_MAX_LIMIT}")
        return limit

    @staticmethod
    def _check_cursor(cursor: Optional[str]):
        if cursor is None:
            return
        try:
            uuid.UUID(cursor)
        except ValueError:
            raise InvalidInput("cursor is not a valid video id")

    @staticmethod
    def _to_view(video: Video, like_count, is_liked) -> VideoView:
        return VideoView(
            id=video.id,
            title=video.title,
            description=video.description,
            url=video.url,
            created_at=video.created_at,
            user=UserPublic.model_validate(video.user),
            like_count=like_count or 0,
            is_liked=bool(is_liked),
        )
