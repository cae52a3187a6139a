"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import computed_field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Database
    DATABASE_URL: str = "sqlite:///./rebook.db"

    SECRET_KEY: str = ""

    # API (constants, not from env)
    PROJECT_NAME: str = "re-book API"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Auth
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 15

    # Viewer session
    SESSION_SECRET_KEY: str = ""
    SESSION_COOKIE_NAME: str = "rebook_session"
    SESSION_MAX_AGE_SECONDS: int = 14 * 24 * 60 * 60
    COOKIE_SECURE: bool = True

    # Board paging
    LIST_PAGE_SIZE: int = 9
    REVIEW_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    @computed_field  # type: ignore[prop-decorator]
    @property
    def session_secret(self) -> str:
        """Secret used to sign the session cookie."""
        return self.SESSION_SECRET_KEY or self.SECRET_KEY

    @field_validator("JWT_ALGORITHM", mode="after")
    @classmethod
    def normalize_algorithm(cls, value: str) -> str:
        """Upper-case the JWT algorithm name."""
        return value.strip().upper()

    @model_validator(mode="after")
    def validate_secrets(self) -> "Settings":
        """Require real secrets outside development and test."""
        if self.ENVIRONMENT == "production" and not self.SECRET_KEY:
            msg = "SECRET_KEY is required when ENVIRONMENT is 'production'"
            raise ValueError(msg)
        if self.LIST_PAGE_SIZE > self.MAX_PAGE_SIZE or self.REVIEW_PAGE_SIZE > self.MAX_PAGE_SIZE:
            msg = "Default page sizes cannot exceed MAX_PAGE_SIZE"
            raise ValueError(msg)
        return self


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
    # Determine if we should use JSON output (production) or console output (dev)
    use_json = environment == "production"

    # Configure stdlib logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
