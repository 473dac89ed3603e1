"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Connection management
  - create_all_tables(), drop_all_tables(): Schema lifecycle
  - EnrollmentModel: Enrollment entity
  - enrollment_crud: Enrollment store singleton

Dependencies: sqlalchemy, enrollments_service.configs
System role: Database adapter providing persistent storage for enrollments
"""

from enrollments_service.boundary.db.base import Base, TimestampMixin
from enrollments_service.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from enrollments_service.boundary.db.create_tables import create_all_tables, drop_all_tables
from enrollments_service.boundary.db.models.enrollment_model import EnrollmentModel
from enrollments_service.boundary.db.CRUD import BaseCRUD, EnrollmentCRUD, enrollment_crud

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Schema
    "create_all_tables",
    "drop_all_tables",
    # Models
    "EnrollmentModel",
    # CRUD
    "BaseCRUD",
    "EnrollmentCRUD",
    "enrollment_crud",
]
