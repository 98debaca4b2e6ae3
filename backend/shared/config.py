"""
Centralized configuration for the Campus Aid backend.

All settings are loaded from environment variables with sensible defaults.
Every variable is prefixed with CAMPUS_AID_ (e.g., CAMPUS_AID_PORT).
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CAMPUS_AID_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Campus Aid API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Rides
    default_driver_rating: str = "4.8"  # no rating system yet

    # Demo principal, seeded at startup; every request acts as this user
    demo_username: str = "saurabh.bhandari"
    demo_password: str = "password123"
    demo_full_name: str = "Saurabh Bhandari"
    demo_profile_image: Optional[str] = (
        "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d"
        "?ixlib=rb-4.0.3&auto=format&fit=crop&w=100&h=100"
    )
    demo_verified: bool = True


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
