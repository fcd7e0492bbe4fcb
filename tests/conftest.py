from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from klip.core.security import create_access_token, get_password_hash
from klip.db import build_engine, get_db, init_db
from klip.main import app
from klip.models.like import Like
from klip.models.user import User
from klip.models.video import Video

BASE_TIME = datetime(2026, 1, 1, 12, 0, 0)


@pytest.fixture
def engine():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    def _make_user(name="alice", email=None, password=None):
        user = User(
            name=name,
            email=email or f"{name}@example.com",
            password_hash=get_password_hash(password) if password else None,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_video(db):
    def _make_video(user, title="clip", seconds=0, description=None):
        video = Video(
            user_id=user.id,
            title=title,
            description=description,
            url=f"https://cdn.example.com/videos/{title}.mp4",
            created_at=BASE_TIME + timedelta(seconds=seconds),
        )
        db.add(video)
        db.commit()
        db.refresh(video)
        return video

    return _make_video


@pytest.fixture
def like(db):
    def _like(user, video):
        db.add(Like(user_id=user.id, video_id=video.id))
        db.commit()

    return _like


@pytest.fixture
def auth_headers():
    def _auth_headers(user):
        token = create_access_token({"sub": user.id})
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers
