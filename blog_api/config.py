from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    APP_NAME: str = "Community Blog API"
    SECRET_KEY: str = "change_me_in_production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    DATABASE_URL: str = "sqlite:///./community_blog.db"

    HOST: str = "0.0.0.0"
    PORT: int = 6500
    LOG_LEVEL: str = "INFO"

    # CORS: default allow the local frontend on port 3001 (override via .env)
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3001",
    ]

    model_config = SettingsConfigDict(env_file=".env")


settings = Settings()
