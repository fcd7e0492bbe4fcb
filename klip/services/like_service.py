from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from klip.core.errors import Conflict, NotFound
from klip.core.logging import logger
from klip.models.like import Like
from klip.models.video import Video
from klip.schemas.video import ToggleLikeResult


class LikeService:
    def __init__(self, db: Session):
        self.db = db

    def toggle_like(self, viewer_id: str, video_id: str) -> ToggleLikeResult:
        """Flip the viewer's like on a video inside one transaction.

        The unique (user_id, video_id) constraint backs up the check-then-act:
        if a concurrent request inserted the same like first, the insert
        fails and the caller gets a Conflict instead of a duplicate row.
        """
        video = self.db.query(Video).filter(Video.id == video_id).first()
        if not video:
            raise NotFound(f"Video {video_id} not found")

        existing_like = self._find_like(viewer_id, video_id)

        try:
            if existing_like:
                self.db.delete(existing_like)
                is_liked = False
            else:
                self.db.add(Like(user_id=viewer_id, video_id=video_id))
                is_liked = True
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning(f"Concurrent like toggle on video {video_id} by user {viewer_id}")
            raise Conflict("Like state changed concurrently, please retry")

        logger.info(f"User {viewer_id} {'liked' if is_liked else 'unliked'} video {video_id}")
        return ToggleLikeResult(is_liked=is_liked)

    def _find_like(self, viewer_id: str, video_id: str):
        return (
            self.db.query(Like)
            .filter(Like.user_id == viewer_id, Like.video_id == video_id)
            .with_for_update()
            .first()
        )
