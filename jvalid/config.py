from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"
    log_json: bool = False  # True for production (structured JSON), False for dev (colored)

    # Validation
    union_debug_errors: bool = Field(
        default=False,
        description="Attach suppressed per-member errors to union_mismatch errors",
    )
    max_received_length: int = Field(default=200, ge=1)

    model_config = SettingsConfigDict(env_prefix="JVALID_", env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
