"""
Enrollments router package.

Exports the router for enrollment management endpoints.
"""

from .enrollment_error_handling import request_validation_error_handler
from .enrollments_router import router

__all__ = ["router", "request_validation_error_handler"]
