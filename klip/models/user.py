from klip.models.basemodel import Base, generate_uuid
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    email = Column(String(255), unique=True, nullable=False)
    name = Column(String(255), nullable=False)
    password_hash = Column(Text)
    image = Column(Text)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    videos = relationship(
        "Video",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True
    )
    likes = relationship(
        "Like",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True
    )
