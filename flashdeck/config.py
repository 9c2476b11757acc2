"""Settings and logging setup for the Flashdeck service."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["development", "production", "test"]


class Settings(BaseSettings):
    """Service settings, read from the environment or a .env file."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    ENVIRONMENT: Environment = "development"

    DATABASE_URL: str = "sqlite:///./flashdeck.db"
    # Upper bound in seconds for one store call; None means no bound
    STORE_TIMEOUT_SECONDS: float | None = 5.0

    # Shared with the identity provider that signs access tokens
    SECRET_KEY: str = ""
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 15

    PROJECT_NAME: str = "Flashdeck API"
    VERSION: str = "0.1.0"
    API_V1_PREFIX: str = "/api/v1"
    CORS_ORIGINS: list[str] = ["*"]

    @property
    def uses_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    @field_validator("STORE_TIMEOUT_SECONDS", mode="after")
    @classmethod
    def check_store_timeout(cls, value: float | None) -> float | None:
        """Reject zero and negative timeouts."""
        if value is not None and value <= 0:
            raise ValueError("STORE_TIMEOUT_SECONDS must be positive")
        return value


_SHARED_PROCESSORS: list[Callable[..., Any]] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
]


def configure_logging(environment: str = "development") -> None:
    """
    Route stdlib logging to stdout and set up structlog on top of it.

    Production emits one JSON object per line; other environments get the
    colored console renderer.
    """
    level = logging.DEBUG if environment == "development" else logging.INFO
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    renderer: Callable[..., Any] = (
        structlog.processors.JSONRenderer()
        if environment == "production"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[*_SHARED_PROCESSORS, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings."""
    return Settings()
