"""
Remote service configuration settings.

Locations and call policy for the course catalog and student registry
services consulted before an enrollment is written.

Dependencies: pydantic, pydantic_settings
System role: Outbound HTTP client configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from enrollments_service.configs.base import BaseSettings


class RemoteServicesSettings(BaseSettings):
    """Course and student service client configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="REMOTE_",
        case_sensitive=False,
        extra="ignore",
    )

    courses_base_url: str = Field(
        default="http://localhost:7002",
        description="Base URL of the courses service",
    )
    students_base_url: str = Field(
        default="http://localhost:7001",
        description="Base URL of the students service",
    )
    timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Per-request timeout for remote lookups",
    )
    retry_attempts: int = Field(
        default=3,
        ge=1,
        description="Attempts per lookup on connection failures and timeouts",
    )
    retry_backoff_seconds: float = Field(
        default=0.2,
        ge=0,
        description="Initial exponential backoff between lookup attempts",
    )
    concurrent_lookups: bool = Field(
        default=False,
        description="Dispatch student and course lookups concurrently",
    )
