from typing import List
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "Campus Portal"
    DATABASE_URL: str = "sqlite:///./campus_portal.db"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = [
        "http://127.0.0.1:5173",
        "http://localhost:5173",
    ]

    # memory | remote | sql
    RECORD_PROVIDER: str = "memory"
    FIXTURE_DIR: str = ""
    SIMULATED_LATENCY_MIN_MS: int = 200
    SIMULATED_LATENCY_MAX_MS: int = 500

    REMOTE_API_URL: str = "http://localhost:8080/api/records"
    REMOTE_API_KEY: str = ""
    REMOTE_API_TIMEOUT: float = 10.0

    DEFAULT_COURSE_CREDITS: int = 3

    class Config:
        env_file = ".env"

settings = Settings()
