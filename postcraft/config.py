"""Configuration management using Pydantic Settings."""

from pathlib import Path

from pydantic import AliasChoices, Field, HttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict

from postcraft.llm import DEFAULT_MODEL

# XDG config directory for user configuration
XDG_CONFIG_PATH = Path.home() / ".config" / "postcraft"

DEFAULT_FEED_URL = "https://rss-feed-aggrigator.onrender.com/rss"


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=[
            XDG_CONFIG_PATH / "config.env",  # User config (lower priority)
            ".env",  # Project .env (higher priority)
        ],
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # LLM
    gemini_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY"),
        description="Gemini API key; generation refuses to run without it",
    )
    gemini_model: str = Field(
        default=DEFAULT_MODEL,
        validation_alias=AliasChoices("GEMINI_MODEL", "LLM_MODEL"),
        description="Gemini model used for every generation call",
    )

    # News feed
    feed_url: HttpUrl = Field(
        default=DEFAULT_FEED_URL, validate_default=True, description="RSS feed URL"
    )
    feed_timeout_seconds: float = Field(default=30.0, gt=0, description="HTTP timeout for the feed")
    max_description_chars: int = Field(
        default=200, ge=20, description="Candidate descriptions are cut to this length"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    @property
    def has_api_key(self) -> bool:
        return bool(self.gemini_api_key and self.gemini_api_key.strip())


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get application settings (singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
