"""
Enrollment CRUD operations.

Enrollment store over async SQLAlchemy sessions. Adds with an existing
identifier are rejected; saves overwrite.

Dependencies: sqlalchemy, enrollments_service.boundary.db.models
System role: Enrollment persistence operations
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from enrollments_service.boundary.db.CRUD.base_crud import BaseCRUD
from enrollments_service.boundary.db.models.enrollment_model import EnrollmentModel
from enrollments_service.core.exceptions import EnrollmentConflictError


class EnrollmentCRUD(BaseCRUD[EnrollmentModel]):
    """CRUD operations for EnrollmentModel keyed by enrollment_id."""

    def __init__(self) -> None:
        """Initialize EnrollmentCRUD with EnrollmentModel."""
        super().__init__(EnrollmentModel, id_attribute="enrollment_id")

    async def create(self, session: AsyncSession, instance: EnrollmentModel) -> EnrollmentModel:
        """
        Insert a new enrollment.

        Args:
            session: Async database session
            instance: Transient enrollment

        Returns:
            EnrollmentModel: Inserted enrollment

        Raises:
            EnrollmentConflictError: If the enrollment_id already exists
        """
        try:
            return await super().create(session, instance)
        except IntegrityError as e:
            raise EnrollmentConflictError(instance.enrollment_id) from e


enrollment_crud = EnrollmentCRUD()
