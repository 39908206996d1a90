"""Application settings and configuration."""

from functools import lru_cache
from typing import ClassVar, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="DATAOBJECTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Data Objects", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")

    # Logging
    log_level: str = Field(default="INFO", description="Root logging level")
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Format string passed to logging.basicConfig",
    )

    # Export
    record_format: Literal["mapping", "orderedPairs"] = Field(
        default="mapping",
        description="Shape used by the demo driver when exporting data objects",
    )

    # Demo driver
    demo_book_id: str = Field(default="201", description="Book fetched by the demo")
    demo_author_id: str = Field(
        default="101", description="Author fetched by the demo"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
