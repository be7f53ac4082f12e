"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    log_level: str = "INFO"

    # Quiz content service
    quiz_api_base_url: str = "http://localhost:3000"
    quiz_api_token: str | None = None
    quiz_api_parent_id: str = ""
    quiz_api_timeout: float = 30.0

    # Recommendation policy
    weak_focus_probability: float = Field(default=0.7, ge=0.0, le=1.0)
    strong_reinforce_probability: float = Field(default=0.67, ge=0.0, le=1.0)
    random_seed: int | None = None

    @field_validator("quiz_api_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
