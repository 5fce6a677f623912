"""
Configuration management for ESPN Scraper.

Uses Pydantic Settings to load configuration from environment variables
(prefixed with ``ESPN_SCRAPER_``) with sensible defaults. Nothing in here is
secret; the defaults match what espn.com tolerates for a single sequential
client.

Usage:
    from espn_scraper.config import settings
    print(settings.request_timeout)
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Environment variables can be set directly or via a .env file
    in the project root directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="ESPN_SCRAPER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ==========================================================================
    # HTTP Configuration
    # ==========================================================================

    request_timeout: float = Field(
        default=10.0,
        description="Per-request timeout in seconds",
    )
    request_max_attempts: int = Field(
        default=3,
        ge=1,
        description="Total attempts per request, including the first one",
    )
    request_retry_interval: float = Field(
        default=2.0,
        description="Base delay before the first retry (seconds)",
    )
    request_retry_jitter: float = Field(
        default=0.5,
        ge=0.0,
        description="Random extra delay as a fraction of the computed backoff",
    )
    request_backoff_factor: float = Field(
        default=2.0,
        description="Multiplier applied to the delay after each failed attempt",
    )
    request_retry_statuses: tuple[int, ...] = Field(
        default=(429, 500, 502, 503, 504),
        description="HTTP statuses that are retried instead of failing immediately",
    )
    user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0 Safari/537.36"
        ),
        description="User-Agent header sent with every request",
    )

    # ==========================================================================
    # Parsing Configuration
    # ==========================================================================

    html_parser: str = Field(
        default="lxml",
        description="BeautifulSoup tree builder used for HTML pages",
    )
    local_timezone: str = Field(
        default="America/New_York",
        description="Timezone ESPN uses to key scoreboard dates",
    )

    # ==========================================================================
    # Logging Configuration
    # ==========================================================================

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    # ==========================================================================
    # Validators
    # ==========================================================================

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return upper_v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Using lru_cache ensures we only load settings once,
    which is important because loading from .env can be slow.
    """
    return Settings()


# Convenience alias for importing
settings = get_settings()
