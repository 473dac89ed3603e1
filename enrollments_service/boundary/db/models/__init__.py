"""
Database models package.

Exports:
  - EnrollmentModel: Enrollment ORM model

Dependencies: sqlalchemy, enrollments_service.boundary.db.base
System role: Database model definitions for domain entities
"""

from enrollments_service.boundary.db.models.enrollment_model import (
    ENROLLMENT_ID_LENGTH,
    EnrollmentModel,
    generate_enrollment_id,
)

__all__ = ["ENROLLMENT_ID_LENGTH", "EnrollmentModel", "generate_enrollment_id"]
