"""Configuration management using pydantic-settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from CF_APP_LISTER_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CF_APP_LISTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # cf CLI
    cf_binary: str = Field(default="cf", description="cf CLI executable")
    cf_home: str | None = Field(
        default=None,
        description="Directory holding the cf CLI .cf folder (defaults to $CF_HOME or ~)",
    )
    command_timeout: int = Field(
        default=60,
        gt=0,
        description="Timeout in seconds for each cf curl call",
    )

    # Pagination
    max_pages: int | None = Field(
        default=None,
        description="Stop listing after this many pages (unset or 0 for no limit)",
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")

    @field_validator("max_pages")
    @classmethod
    def non_negative_max_pages(cls, v: int | None) -> int | None:
        if v is not None and v < 0:
            raise ValueError("max_pages must be >= 0")
        return v or None

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.upper()


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
