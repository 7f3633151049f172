"""Configuration management via environment variables."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://news.knowivate.com/api/latest"


class Config(BaseSettings):
    """Application configuration loaded from ``NEWS_READER_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="NEWS_READER_")

    api_url: str = DEFAULT_API_URL
    min_loading_seconds: float = 0.5

    @field_validator("api_url")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        """Reject empty or whitespace-only values."""
        if not v or not v.strip():
            raise ValueError("must not be empty or whitespace")
        return v

    @field_validator("min_loading_seconds")
    @classmethod
    def must_not_be_negative(cls, v: float) -> float:
        """Reject delays below zero."""
        if v < 0:
            raise ValueError("must not be negative")
        return v
