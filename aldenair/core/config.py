"""Storefront service configuration"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    model_config = SettingsConfigDict(
        env_file="config/.env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "ALDENAIR Storefront"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8001

    # Money
    currency: str = "EUR"
    currency_symbol: str = "€"

    # Cart sessions
    cart_session_max_age_hours: int = 24
    cart_snapshot_dir: Optional[str] = None

    # Rate limiting for cart writes
    rate_limit_max_attempts: int = 100
    rate_limit_window_seconds: float = 60
    rate_limit_block_seconds: Optional[float] = 300

    # Rate limiting for checkout handoff
    checkout_rate_limit_max_attempts: int = 3
    checkout_rate_limit_window_seconds: float = 300
    checkout_rate_limit_block_seconds: Optional[float] = 300

    # Read client addresses from X-Forwarded-For / X-Real-IP (behind a proxy only)
    trust_forwarded_for: bool = False

    # Loyalty
    loyalty_points_per_euro: int = 1

    @property
    def snapshots_enabled(self) -> bool:
        return bool(self.cart_snapshot_dir)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
