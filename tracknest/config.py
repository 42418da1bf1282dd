# ============================================================================
# FILE: tracknest/config.py
# ============================================================================
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    """Application configuration using Pydantic BaseSettings"""

    # App settings
    APP_NAME: str = "TrackNest"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./tracknest.db"  # Any SQLAlchemy URL (MySQL, PostgreSQL) works

    # Redis cache (chart lookups only)
    REDIS_URL: str = "redis://localhost:6379/0"
    CACHE_EXPIRE_SECONDS: int = 3600

    # Security
    SECRET_KEY: str = "your-secret-key-change-this-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 180
    AUTH_HEADER: str = "x-auth-token"

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    # Client
    API_BASE_URL: str = "http://localhost:8000"

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
