# app/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    ENV: str = "dev"
    API_PREFIX: str = "/api"
    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    # trace validation (glyph units, 260x300 space)
    TRACE_TOLERANCE: float = 20.0
    TRACE_REQUIRED_COVERAGE: float = 0.80
    TRACE_MIN_SEGMENT_LENGTH: float = 5.0
    TRACE_SAMPLE_SPACING: float = 5.0
    TRACE_MIN_SAMPLES: int = 10

    REWARD_POINTS: int = 10      # per completed letter / answer / pair

    # pydantic v2 settings
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",   # ignore unknown env vars instead of raising errors
    )

settings = Settings()
