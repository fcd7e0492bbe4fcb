from klip.models.basemodel import Base, generate_uuid
from sqlalchemy import Column, String, Text, ForeignKey, DateTime, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

class Video(Base):
    __tablename__ = "videos"
    __table_args__ = (
        # feed order: created_at desc, id desc
        Index("ix_videos_created_at_id", "created_at", "id"),
        Index("ix_videos_user_created_at", "user_id", "created_at"),
    )

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    title = Column(Text, nullable=False)
    description = Column(Text)
    url = Column(Text, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    user = relationship("User", back_populates="videos")
    likes = relationship(
        "Like",
        back_populates="video",
        cascade="all, delete-orphan",
        passive_deletes=True
    )
