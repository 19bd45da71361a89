"""Application Settings using Pydantic.

Environment-based configuration with validation.

Environment Variables:
    ENVIRONMENT: development | staging | production
    DEBUG: Enable debug mode (default: False)
    SEED_ORDER_COUNT: Скільки purchase orders створити при bootstrap (default: 20)
    SEED_RANDOM_SEED: Фіксований seed для відтворюваних quantities (optional)
    ENFORCE_TRANSITIONS: Strict state machine для approve/decline (default: False)

Example .env file:
    ENVIRONMENT=production
    LOG_FORMAT=json
    SEED_RANDOM_SEED=42
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==================== Core ====================
    app_name: str = "Purchase Ordering API"
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False

    # ==================== Bootstrap ====================
    seed_order_count: int = Field(
        default=20,
        ge=0,
        le=99,
        description="Pre-submitted orders seeded at startup (ids 1..N)",
    )
    seed_random_seed: int | None = Field(
        default=None,
        description="Seed for order quantities; None = non-deterministic",
    )

    # ==================== Purchasing ====================
    enforce_transitions: bool = Field(
        default=False,
        description="Reject approve/decline unless the order is Submitted",
    )

    # ==================== Messaging ====================
    event_dispatch_enabled: bool = Field(
        default=True,
        description="Run in-process dispatcher draining the event bus to subscribers",
    )

    # ==================== Logging ====================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload.

    Returns:
        Settings instance.
    """
    return Settings()
