"""
Configuration management for the Hackernews backend
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = "sqlite+aiosqlite:///./hackernews.db"
    database_pool_size: int = 10
    database_max_overflow: int = 20

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    sql_echo: bool = False
    log_level: str = "INFO"

    # GraphQL
    # Replace messages of non-domain errors with a generic one
    mask_errors: bool = True

    class Config:
        env_file = ".env"
        env_prefix = "HACKERNEWS_"
        case_sensitive = False


# Global settings instance
settings = Settings()
