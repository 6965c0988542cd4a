"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Calibration
    calibration_path: str | None = None  # JSON file; built-in table when unset
    strict_calibration: bool = False

    # Validation
    max_rank: int = 10_000_000

    # MCP
    mcp_server_name: str = "salesrank"
    mcp_server_version: str = "0.1.0"

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
