"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from enrollments_service.configs.base import BaseSettings
from enrollments_service.configs.database import DatabaseSettings
from enrollments_service.configs.remote_services import RemoteServicesSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    app_name: str = "enrollments-service"

    # Aggregated settings
    database: DatabaseSettings = DatabaseSettings()
    remote_services: RemoteServicesSettings = RemoteServicesSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from enrollments_service.configs import get_settings
        settings = get_settings()
    """
    return Settings()
