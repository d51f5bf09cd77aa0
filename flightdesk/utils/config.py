"""
Application settings for flightdesk.

Values come from the process environment, optionally pre-loaded from a
``.env`` file, and are validated by pydantic before use.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppConfig(BaseModel):
    """Validated flightdesk settings."""

    # Storage
    database_url: Optional[str] = Field(
        default=None,
        description="Database connection URL; built from DB_* variables when unset"
    )
    database_echo: bool = Field(default=False, description="Log every SQL statement")

    # Diagnostics
    debug: bool = Field(default=False, description="Force DEBUG logging")
    log_level: str = Field(default="INFO", description="Root logging level")

    # Sample data
    seed_random_seed: int = Field(default=123456, description="Faker seed for reproducible data")
    seed_airports: int = Field(default=5, ge=2, description="Airports created by the seeder")
    seed_aircraft: int = Field(default=5, ge=1, description="Aircraft created by the seeder")
    seed_flights: int = Field(default=5, ge=0, description="Flights created by the seeder")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, level: str) -> str:
        level = level.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of: {', '.join(LOG_LEVELS)}")
        return level


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").lower() in ("true", "1", "yes", "on")


def load_config(env_file: Optional[str] = None) -> AppConfig:
    """
    Build an AppConfig from the environment.

    Variables already set in the environment take precedence over the
    ``.env`` file.

    Args:
        env_file: Path of the dotenv file to read first, ``.env`` by default.
            A missing file is skipped.

    Raises:
        ValueError: If a variable cannot be parsed or fails validation
    """
    env_path = env_file or ".env"
    if os.path.exists(env_path):
        load_dotenv(env_path)
        logger.debug(f"Loaded environment from {env_path}")

    try:
        return AppConfig(
            database_url=os.getenv("DATABASE_URL") or None,
            database_echo=_env_flag("DATABASE_ECHO"),
            debug=_env_flag("FLIGHTDESK_DEBUG"),
            log_level=os.getenv("FLIGHTDESK_LOG_LEVEL", "INFO"),
            seed_random_seed=int(os.getenv("SEED_RANDOM_SEED", "123456")),
            seed_airports=int(os.getenv("SEED_AIRPORTS", "5")),
            seed_aircraft=int(os.getenv("SEED_AIRCRAFT", "5")),
            seed_flights=int(os.getenv("SEED_FLIGHTS", "5")),
        )
    except (ValueError, ValidationError) as e:
        raise ValueError(f"Configuration validation failed: {e}")


def configure_logging(config: AppConfig) -> None:
    """Configure the root logger from the application configuration."""
    level = logging.DEBUG if config.debug else getattr(logging, config.log_level)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug(f"Logging configured at {logging.getLevelName(level)}")


_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Return the process-wide AppConfig, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() reloads it."""
    global _config
    _config = None
