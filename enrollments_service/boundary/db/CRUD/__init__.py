"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from enrollments_service.boundary.db.CRUD import enrollment_crud

    enrollment = await enrollment_crud.get_by_id(db, enrollment_id)
"""

from enrollments_service.boundary.db.CRUD.base_crud import BaseCRUD
from enrollments_service.boundary.db.CRUD.enrollment_crud import EnrollmentCRUD, enrollment_crud

__all__ = [
    "BaseCRUD",
    "EnrollmentCRUD",
    "enrollment_crud",
]
