"""Application configuration using pydantic-settings."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from tool_agent.constants import DEFAULT_TOOLS_CONFIG_PATH


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # HTTP server
    app_title: str = "Tool Agent"
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    cors_allow_origins: list[str] = ["*"]

    # Tool catalog (defaults to the packaged tool_definitions.json)
    tools_config_path: Path | None = None

    # GitHub REST API
    github_api_url: str = "https://api.github.com"
    github_user_agent: str = "Tool-Agent/1.0"

    @property
    def resolved_tools_config_path(self) -> Path:
        return self.tools_config_path or DEFAULT_TOOLS_CONFIG_PATH


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
