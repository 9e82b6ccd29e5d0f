"""
Configuration management for the CVSift recruitment and compliance platform.

This module provides centralized configuration management supporting:
- Environment variables and .env files
- Local development defaults
- Plan-independent tuning of matching, teams and activity logs
"""

from functools import lru_cache
from typing import List, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import structlog

logger = structlog.get_logger(__name__)


class Settings(BaseSettings):
    """
    Main application settings with smart defaults for local development.
    """

    # Environment Detection
    ENVIRONMENT: str = Field(
        default="local",
        description="Environment (local/development/staging/production)"
    )
    DEBUG: bool = Field(
        default=False,
        description="Debug mode"
    )

    # Core Application Settings
    APP_NAME: str = Field(
        default="CVSift",
        description="Application name"
    )
    APP_VERSION: str = Field(
        default="1.0.0",
        description="Application version"
    )

    # Security (Required)
    SECRET_KEY: str = Field(
        ...,
        description="JWT signing secret key (min 32 chars)"
    )
    JWT_ALGORITHM: str = Field(
        default="HS256",
        description="JWT algorithm"
    )
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(
        default=60,
        description="Access token expiry in minutes"
    )

    # Server Configuration
    HOST: str = Field(
        default="0.0.0.0",
        description="Server host"
    )
    PORT: int = Field(
        default=8000,
        description="Server port"
    )

    # CORS Configuration
    CORS_ORIGINS: str = Field(
        default="*",
        description="Comma-separated CORS origins"
    )

    # Logging
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )
    LOG_FORMAT: str = Field(
        default="auto",
        description="Log format (json/console/auto)"
    )

    # PostgreSQL Configuration
    POSTGRES_URL: Optional[str] = Field(
        default=None,
        description="PostgreSQL connection URL"
    )
    POSTGRES_HOST: str = Field(
        default="localhost",
        description="PostgreSQL host"
    )
    POSTGRES_PORT: int = Field(
        default=5432,
        description="PostgreSQL port"
    )
    POSTGRES_USER: str = Field(
        default="cvsift",
        description="PostgreSQL user"
    )
    POSTGRES_PASSWORD: str = Field(
        default="cvsift",
        description="PostgreSQL password"
    )
    POSTGRES_DB: str = Field(
        default="cvsift",
        description="PostgreSQL database name"
    )
    DB_AUTO_CREATE_TABLES: bool = Field(
        default=True,
        description="Create tables at startup in local/development environments"
    )

    # File Storage Configuration
    LOCAL_STORAGE_PATH: str = Field(
        default="./storage/cvs",
        description="Local CV file storage path"
    )
    MAX_FILE_SIZE: int = Field(
        default=10 * 1024 * 1024,  # 10MB
        description="Maximum CV file size in bytes"
    )

    # Notifications
    EMAIL_PROVIDER: str = Field(
        default="local",
        description="Email delivery backend (local/http)"
    )
    EMAIL_API_URL: Optional[str] = Field(
        default=None,
        description="HTTP mail API endpoint used when EMAIL_PROVIDER=http"
    )
    EMAIL_API_KEY: Optional[str] = Field(
        default=None,
        description="Bearer key for the HTTP mail API"
    )
    EMAIL_FROM: str = Field(
        default="no-reply@cvsift.co.za",
        description="Sender address for outgoing email"
    )

    # Teams
    TEAM_INVITE_EXPIRY_DAYS: int = Field(
        default=7,
        description="Days before a team invitation expires"
    )
    FRONTEND_URL: str = Field(
        default="http://localhost:3000",
        description="Frontend base URL used to build invitation links"
    )

    # Matching
    SKILL_MATCH_THRESHOLD: int = Field(
        default=85,
        description="Minimum similarity (0-100) for two skills to be treated as equal"
    )
    LOCATION_MATCH_THRESHOLD: int = Field(
        default=85,
        description="Minimum similarity (0-100) for two locations to be treated as equal"
    )

    # Activity Logs
    ACTIVITY_LOG_PAGE_LIMIT: int = Field(
        default=100,
        description="Maximum activity log entries returned per request"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator('SECRET_KEY')
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        """Validate that secret key is secure enough."""
        if len(v) < 32:
            raise ValueError("SECRET_KEY must be at least 32 characters long")
        return v

    @field_validator('ENVIRONMENT')
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate and normalize environment name."""
        v = v.lower()
        if v not in ('local', 'development', 'staging', 'production'):
            logger.warning(f"Unknown environment: {v}, defaulting to 'local'")
            return 'local'
        return v

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT == 'production'

    def is_local(self) -> bool:
        """Check if running in local environment."""
        return self.ENVIRONMENT == 'local'

    def should_auto_create_tables(self) -> bool:
        return self.DB_AUTO_CREATE_TABLES and self.ENVIRONMENT in ('local', 'development')

    def get_cors_origins(self) -> List[str]:
        """Get CORS origins as a list."""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    def get_postgres_url(self) -> str:
        """Get PostgreSQL connection URL."""
        if self.POSTGRES_URL:
            return self.POSTGRES_URL
        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    def get_invite_url(self, invite_id: str) -> str:
        return f"{self.FRONTEND_URL.rstrip('/')}/accept-invite?inviteId={invite_id}"


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings.

    Loads settings from environment variables and the .env file and
    returns a validated Settings instance.
    """
    settings = Settings()

    logger.info(
        "Settings loaded",
        environment=settings.ENVIRONMENT,
        debug=settings.DEBUG,
        email_provider=settings.EMAIL_PROVIDER,
        auto_create_tables=settings.should_auto_create_tables(),
    )

    return settings
