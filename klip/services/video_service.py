from sqlalchemy.orm import Session

from klip.core.logging import logger
from klip.models.user import User
from klip.models.video import Video
from klip.schemas.user import UserPublic
from klip.schemas.video import VideoCreate, VideoView


class VideoService:
    def __init__(self, db: Session):
        self.db = db

    def create_video(self, owner: User, video: VideoCreate) -> VideoView:
        db_video = Video(
            user_id=owner.id,
            title=video.title,
            description=video.description,
            url=video.url,
        )
        self.db.add(db_video)
        self.db.commit()
        self.db.refresh(db_video)
        logger.info(f"User {owner.id} registered video {db_video.id}")

        return VideoView(
            id=db_video.id,
            title=db_video.title,
            description=db_video.description,
            url=db_video.url,
            created_at=db_video.created_at,
            user=UserPublic.model_validate(owner),
        )

    def count_videos_by_user(self, user_id: str) -> int:
        return self.db.query(Video).filter(Video.user_id == user_id).count()
