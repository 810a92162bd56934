"""Application settings and configuration."""

from functools import lru_cache
from typing import ClassVar

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Today I Learned", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")
    host: str = Field(default="0.0.0.0", description="Host to bind to")
    port: int = Field(default=8000, description="Port to bind to")
    log_level: str = Field(default="INFO", description="Root log level")

    # CORS
    allowed_origins: list[str] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:8000",
            "http://localhost:5173",
        ],
        description="Allowed CORS origins",
    )

    # Remote store (Supabase / PostgREST)
    supabase_url: str = Field(
        default="http://localhost:54321", description="Base URL of the hosted backend"
    )
    supabase_key: str | None = Field(
        default=None, description="API key used for the hosted backend"
    )
    facts_table: str = Field(default="facts", description="Table holding facts")
    request_timeout: float = Field(
        default=10.0, description="Timeout in seconds for remote store requests"
    )

    @property
    def rest_url(self) -> str:
        """PostgREST endpoint derived from the backend base URL."""
        return f"{self.supabase_url.rstrip('/')}/rest/v1"

    # Facts
    fact_row_limit: int = Field(
        default=100, description="Maximum number of facts returned by a listing"
    )
    max_fact_length: int = Field(
        default=200, description="Maximum number of characters in a fact"
    )
    default_source_url: str = Field(
        default="https://example.com",
        description="Source URL pre-filled in the submission form",
    )

    # Browser sessions
    session_cookie_name: str = Field(
        default="til_session", description="Cookie carrying the browser session id"
    )
    max_sessions: int = Field(
        default=1000, description="Maximum number of browser sessions kept in memory"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
