"""Application configuration using pydantic-settings."""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Search provider ("brave" or "serpapi")
    search_provider: str = "brave"
    # Accept the legacy SERP_API_KEY name as well
    search_api_key: Optional[str] = Field(
        None, validation_alias=AliasChoices("SEARCH_API_KEY", "SERP_API_KEY")
    )
    search_result_count: int = 5
    search_timeout_seconds: float = 8.0

    # Page extraction
    # 8s per page keeps the whole request inside a ~10s serverless deadline
    extraction_timeout_ms: int = 8000
    max_processed_results: int = 2
    # Hard ceiling: excerpts never exceed 4000 chars plus the ellipsis
    max_content_chars: int = Field(4000, ge=1, le=4000)
    snippet_chars: int = 250
    restricted_domains: list[str] = ["linkedin.com"]
    # Overrides the built-in desktop browser User-Agent
    user_agent: Optional[str] = None

    # CORS (comma separated)
    cors_origins: str = "*"

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get cached settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings for testing."""
    global _settings
    _settings = None
