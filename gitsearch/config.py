"""
Git Search - Configuration

Pydantic Settings for all configuration via environment variables.
"""

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional, Literal


class GitSettings(BaseSettings):
    """Git binary and repository configuration."""
    binary: str = Field("git", alias="GIT_BINARY")
    repo_path: str = Field(".", alias="GIT_REPO_PATH")
    timeout_ms: int = Field(30000, ge=1, alias="GIT_TIMEOUT_MS")

    model_config = {"env_prefix": "", "extra": "ignore", "populate_by_name": True}


class SearchSettings(BaseSettings):
    """Per-stage result caps and highlight filter."""
    backend: Literal["git"] = Field("git", alias="SEARCH_BACKEND")
    latest_limit: int = Field(1, ge=1, alias="SEARCH_LATEST_LIMIT")
    history_limit: int = Field(10, ge=1, alias="SEARCH_HISTORY_LIMIT")
    file_limit: int = Field(20, ge=1, alias="SEARCH_FILE_LIMIT")
    highlight_hash: Optional[str] = Field(None, alias="SEARCH_HIGHLIGHT_HASH")

    model_config = {"env_prefix": "", "extra": "ignore", "populate_by_name": True}


class MCPSettings(BaseSettings):
    """MCP server configuration."""
    transport: Literal["sse", "stdio"] = Field("stdio", alias="MCP_TRANSPORT")
    port: int = Field(8080, alias="MCP_PORT")
    host: str = Field("127.0.0.1", alias="MCP_HOST")

    model_config = {"env_prefix": "", "extra": "ignore", "populate_by_name": True}


class LogSettings(BaseSettings):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "WARNING", alias="LOG_LEVEL"
    )

    model_config = {"env_prefix": "", "extra": "ignore", "populate_by_name": True}


class Settings(BaseSettings):
    """Main settings aggregating all configuration."""
    git: GitSettings = Field(default_factory=GitSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    mcp: MCPSettings = Field(default_factory=MCPSettings)
    log: LogSettings = Field(default_factory=LogSettings)

    model_config = {"env_prefix": "", "extra": "ignore"}


def get_settings() -> Settings:
    """Load settings from environment variables."""
    from dotenv import load_dotenv
    load_dotenv()
    return Settings()
