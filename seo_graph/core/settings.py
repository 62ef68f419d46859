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
    app_name: str = Field(default="SEO Graph API", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")
    testing: bool = Field(default=False, description="Testing mode")
    host: str = Field(default="0.0.0.0", description="Host to bind to")
    port: int = Field(default=8000, description="Port to bind to")

    # CORS
    allowed_origins: list[str] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:8080",
            "http://localhost:5173",
        ],
        description="Allowed CORS origins",
    )

    # PostgreSQL Database
    postgres_user: str = Field(default="admin", description="PostgreSQL user")
    postgres_password: str = Field(
        default="supersecretpassword", description="PostgreSQL password"
    )
    postgres_host: str = Field(default="localhost", description="PostgreSQL host")
    postgres_port: int = Field(default=5432, description="PostgreSQL port")
    postgres_db: str = Field(default="seo_db", description="PostgreSQL database name")
    test_postgres_db: str = Field(
        default="seo_db_test", description="PostgreSQL test database name"
    )
    pool_min_size: int = Field(default=2, description="Minimum pooled connections")
    pool_max_size: int = Field(default=10, description="Maximum pooled connections")

    @property
    def database_name(self) -> str:
        """Database the pool connects to, honouring testing mode."""
        return self.test_postgres_db if self.testing else self.postgres_db

    # Cluster queries
    cluster_list_limit: int = Field(
        default=50, description="Maximum number of clusters listed for selection"
    )
    keyword_opportunity_limit: int = Field(
        default=20, description="Maximum number of keyword opportunities returned"
    )
    keyword_opportunities_strict: bool = Field(
        default=True,
        description=(
            "Exclude keywords linked to any cluster (True) or only those linked "
            "to the requested cluster (False)"
        ),
    )
    keyword_max_difficulty: float = Field(
        default=50, description="Keyword opportunities must be below this difficulty"
    )
    keyword_min_search_volume: int = Field(
        default=100,
        description="Keyword opportunities must exceed this monthly search volume",
    )
    competitor_min_shared_keywords: int = Field(
        default=3,
        description="Minimum keywords a competitor must share with a cluster",
    )
    content_gap_priority: str = Field(
        default="high", description="Priority of content gaps surfaced per cluster"
    )

    # Graph sessions
    session_idle_ttl_seconds: float | None = Field(
        default=1800,
        description=(
            "Idle seconds after which a graph session is discarded; "
            "None keeps sessions until deleted"
        ),
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
