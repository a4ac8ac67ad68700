from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # database
    DATABASE_URL: str = "sqlite:///./bible_quiz.db"
    SQL_ECHO: bool = False

    # quiz
    QUIZ_SIZE: int = 10
    LEADERBOARD_LIMIT: int = 10

    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"


settings = Settings()
