"""
Configuration management for the candidate profile service.

This module provides centralized configuration management supporting:
- Environment variables and a local .env file
- Identity-provider token verification settings
- PostgreSQL connection settings
"""

from functools import lru_cache
from typing import List, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import structlog

logger = structlog.get_logger(__name__)


class Settings(BaseSettings):
    """
    Application settings with defaults suited to local development.
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
        default="Board Champions Profile Service",
        description="Application name"
    )
    APP_VERSION: str = Field(
        default="1.0.0",
        description="Application version"
    )

    # Security (Required)
    SECRET_KEY: str = Field(
        ...,
        description="Shared secret used for HMAC token verification (min 32 chars)"
    )
    AUTH_JWT_ALGORITHM: str = Field(
        default="HS256",
        description="Algorithm the identity provider signs bearer tokens with"
    )
    AUTH_JWT_PUBLIC_KEY: Optional[str] = Field(
        default=None,
        description="PEM public key, required for asymmetric algorithms; HMAC algorithms use SECRET_KEY"
    )
    AUTH_JWT_ISSUER: Optional[str] = Field(
        default=None,
        description="Expected token issuer (not checked when unset)"
    )
    AUTH_JWT_AUDIENCE: Optional[str] = Field(
        default=None,
        description="Expected token audience (not checked when unset)"
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
        default="console",
        description="Log format (json/console)"
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
        default="board_champions",
        description="PostgreSQL user"
    )
    POSTGRES_PASSWORD: str = Field(
        default="board_champions",
        description="PostgreSQL password"
    )
    POSTGRES_DB: str = Field(
        default="board_champions",
        description="PostgreSQL database name"
    )
    DATABASE_POOL_SIZE: int = Field(
        default=10,
        description="Connection pool size"
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
            logger.warning("unknown_environment", environment=v, fallback="local")
            return 'local'
        return v

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT == 'production'

    def get_cors_origins(self) -> List[str]:
        """Get CORS origins as a list."""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    def get_postgres_url(self) -> str:
        """Get PostgreSQL connection URL."""
        if self.POSTGRES_URL:
            return self.POSTGRES_URL
        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    def get_jwt_verification_key(self) -> str:
        """Key used to verify bearer tokens."""
        return self.AUTH_JWT_PUBLIC_KEY or self.SECRET_KEY


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings.

    Loads settings from environment variables and the .env file once and
    returns the same validated instance afterwards.
    """
    settings = Settings()

    logger.info(
        "settings_loaded",
        environment=settings.ENVIRONMENT,
        debug=settings.DEBUG,
        jwt_algorithm=settings.AUTH_JWT_ALGORITHM,
        issuer_checked=bool(settings.AUTH_JWT_ISSUER),
        audience_checked=bool(settings.AUTH_JWT_AUDIENCE),
    )

    return settings
