"""Application configuration using Pydantic Settings.

Configuration is environment-aware:
- APP_ENV determines which .env file to load
- Supports: development, testing, staging, production
- Each environment has its own .env.{environment} file
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Determine which environment to load (default: development)
APP_ENV = os.getenv("APP_ENV", "development")

# Project root (so .env resolution doesn't depend on current working directory)
PROJECT_ROOT = Path(__file__).resolve().parents[2]

ENV_FILE_MAP = {
    "development": ".env.development",
    "testing": ".env.testing",
    "staging": ".env.staging",
    "production": ".env.production",
}

_env_filename = ENV_FILE_MAP.get(APP_ENV, ".env.development")
_env_path = PROJECT_ROOT / _env_filename

# Only load from file if it exists (production might inject via env vars only)
_env_file = str(_env_path) if _env_path.is_file() else None


# Nested BaseSettings don't inherit env_file, so populate os.environ up front
if _env_file:
    from dotenv import load_dotenv
    load_dotenv(_env_file, override=True)


class StatsApiSettings(BaseSettings):
    """Upstream stats API and fetch-layer tuning."""

    api_base: str = Field(
        "https://api.example.com",
        description="Base URL of the upstream stats API",
    )
    api_key: str = Field(
        "",
        description="API key sent in the 'key' query parameter",
    )
    stats_path: str = Field(
        "/ff/stats",
        description="Path segment placed between the base URL and the player ID",
    )
    cache_ttl_seconds: float = Field(
        60.0,
        description="How long a fetched result is served from cache",
        gt=0,
    )
    min_interval_seconds: float = Field(
        1.0,
        description="Minimum spacing between outbound calls, process-wide",
        ge=0,
    )

    model_config = SettingsConfigDict(
        env_prefix="FF_",
        case_sensitive=False,
    )


class BotSettings(BaseSettings):
    """Chat bot credentials. Passed through untouched by the stats layer."""

    token: str | None = Field(
        None,
        validation_alias=AliasChoices("DISCORD_TOKEN"),
    )
    client_id: str | None = Field(
        None,
        validation_alias=AliasChoices("DISCORD_CLIENT_ID", "CLIENT_ID"),
    )
    guild_id: str | None = Field(
        None,
        validation_alias=AliasChoices("DISCORD_GUILD_ID", "GUILD_ID"),
    )

    model_config = SettingsConfigDict(
        case_sensitive=False,
    )

    @property
    def configured(self) -> bool:
        return bool(self.token and self.client_id)


class LogSettings(BaseSettings):
    """Logging output configuration."""

    level: str = Field("INFO", description="Root log level")
    format: str = Field("json", description="'json' or 'plain'")
    output: str = Field("stdout", description="'stdout' or 'file'")
    file_path: str | None = Field(None, description="Log file path when output=file")
    max_bytes: int = Field(
        10_000_000,
        description="Rotate the log file after this many bytes (0 disables rotation)",
        ge=0,
    )
    backup_count: int = Field(3, description="Rotated files to keep", ge=0)
    request_id_header: str = Field(
        "X-Request-ID",
        description="Header used to read and echo the correlation id",
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        case_sensitive=False,
    )


class AppSettings(BaseSettings):
    """Application-wide configuration."""

    debug: bool = Field(
        False,
        description="Enable debug mode with verbose logging",
    )

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        case_sensitive=False,
    )


class Settings(BaseSettings):
    """Main application settings container.

    Automatically loads from the appropriate .env.{APP_ENV} file.
    Nested settings are created via default_factory so env loading works
    after the .env file has been applied to os.environ.
    """

    app_env: str = APP_ENV
    stats_api: StatsApiSettings = Field(default_factory=StatsApiSettings)
    bot: BotSettings = Field(default_factory=BotSettings)
    log: LogSettings = Field(default_factory=LogSettings)
    app: AppSettings = Field(default_factory=AppSettings)

    model_config = SettingsConfigDict(
        case_sensitive=False,
    )


settings = Settings()
