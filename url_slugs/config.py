from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
import os
from functools import lru_cache


class Settings(BaseSettings):
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"

    # Slug defaults, used when SlugOptions leaves them unset
    SLUG_FIELD: str = "slug"
    SLUG_MAX_LENGTH: Optional[int] = None  # None = no limit
    SLUG_SPARSE: bool = False
    SLUG_CREATE_RETRIES: int = 0  # Re-allocations after a collision on insert

    # Logging
    # Leave empty to log to the console only
    LOG_DIR: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"  # Ignore extra fields in .env file
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
