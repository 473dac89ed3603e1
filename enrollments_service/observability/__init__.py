"""
Observability module.

Provides structured logging, correlation ID tracking and request logging.
"""

from enrollments_service.observability.correlation import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    set_correlation_id,
)
from enrollments_service.observability.logger import configure_logging, get_logger

__all__ = [
    "CORRELATION_ID_HEADER",
    "configure_logging",
    "get_correlation_id",
    "get_logger",
    "set_correlation_id",
]
