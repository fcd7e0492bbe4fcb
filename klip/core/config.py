from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./klip.db"
    SQL_ECHO: bool = False

    # Auth
    SECRET_KEY: str = "change-me-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7

    # Feed pagination
    FEED_DEFAULT_LIMIT: int = 10
    FEED_MAX_LIMIT: int = 100

    # FastAPI
    PROJECT_NAME: str = "KLIP"

    class Config:
        env_file = ".env"

@lru_cache()
def get_settings() -> Settings:
    return Settings()
