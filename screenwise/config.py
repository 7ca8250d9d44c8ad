"""
Configuration management with environment variable support and validation.

Design principles:
- Environment-specific configs (dev, staging, prod)
- Validation at startup (fail fast)
- Type safety with Pydantic
"""

import os
from functools import lru_cache
from typing import Literal, cast

from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator

# Load environment variables from .env file
load_dotenv()


class ScheduleConfig(BaseModel):
    """Tunables for schedule derivation."""

    due_soon_months: int = Field(
        default=3, ge=0, description="Horizon within which a screening counts as due"
    )
    default_frequency_months: int = Field(
        default=12, ge=1, description="Interval used when no band or guideline specifies one"
    )
    relevance_sentinel: int = Field(
        default=1000, gt=0, description="Relevance score for guidelines with no usable band"
    )
    upcoming_years: int = Field(
        default=5, ge=0, description="Look-ahead window for upcoming recommendations"
    )


class CacheConfig(BaseModel):
    profile_ttl_seconds: float = Field(
        default=300.0, gt=0.0, description="Lifetime of a cached person profile"
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    format: Literal["json", "console"] = Field(default="json", description="Logging format")


class AppConfig(BaseModel):
    """Main application configuration combining all subsystems."""

    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Environment"
    )
    debug: bool = Field(default=False, description="Enable debug mode")

    schedule: ScheduleConfig = Field(default_factory=ScheduleConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def debug_only_in_dev(self) -> "AppConfig":
        """Ensure debug mode is only allowed in development environment."""
        if self.debug and self.environment != "development":
            raise ValueError("debug mode is only allowed in development environment")
        return self


def load_config_from_env() -> AppConfig:
    """Load configuration from environment variables with validation."""

    def _env_to_literal(val: str) -> Literal["development", "staging", "production"]:
        v = val.strip().lower()
        if v in {"dev", "development"}:
            return "development"
        if v in {"stage", "staging"}:
            return "staging"
        return "production"

    def _level_to_literal(val: str) -> Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
        v = val.strip().upper()
        return cast(
            Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
            v if v in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} else "INFO",
        )

    environment = _env_to_literal(os.getenv("ENVIRONMENT", "development"))
    debug = environment == "development"

    schedule_config = ScheduleConfig(
        due_soon_months=int(os.getenv("DUE_SOON_MONTHS", "3")),
        default_frequency_months=int(os.getenv("DEFAULT_FREQUENCY_MONTHS", "12")),
        upcoming_years=int(os.getenv("UPCOMING_YEARS", "5")),
    )

    cache_config = CacheConfig(
        profile_ttl_seconds=float(os.getenv("PROFILE_CACHE_TTL_SECONDS", "300")),
    )

    logging_config = LoggingConfig(
        level=_level_to_literal(os.getenv("LOG_LEVEL", "INFO")),
        format="console" if debug else "json",
    )

    return AppConfig(
        environment=environment,
        debug=debug,
        schedule=schedule_config,
        cache=cache_config,
        logging=logging_config,
    )


@lru_cache
def get_config() -> AppConfig:
    """Get cached application configuration."""
    return load_config_from_env()
