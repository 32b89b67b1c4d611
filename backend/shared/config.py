"""
Centralized configuration for the BMS Hub backend.

All settings are loaded from environment variables with sensible defaults.
Every variable is prefixed with BMS_ (e.g., BMS_SUPABASE_URL, BMS_JWT_SECRET).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="BMS_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "BMS Hub API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Document store (Supabase, one table per collection)
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""  # direct Postgres URL, used by run_migrations.py only

    # Identity verifier
    jwt_secret: str = ""
    jwt_audience: str = "authenticated"
    jwt_algorithms: list[str] = ["HS256"]

    # Payment gateway (Stripe)
    stripe_secret_key: str = ""
    payment_currency: str = "usd"
    verify_payments_with_gateway: bool = False

    # Defaults for newly saved users
    default_photo_url: str = "https://i.ibb.co/2nqZQFz/default-avatar.png"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
