"""
Enrollment service orchestrator.

Turns an enrollment request into a persisted, enriched enrollment:
validate locally, confirm the student and the course with their owning
services, copy their snapshot fields, then write once. Nothing touches
durable state before the final commit.

Dependencies: enrollments_service.boundary.clients, enrollments_service.boundary.db.CRUD, sqlalchemy
System role: Enrollment use case orchestration
"""

import asyncio
import logging
from typing import Any, AsyncIterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from enrollments_service.boundary.clients import CourseServiceClient, StudentServiceClient
from enrollments_service.boundary.db.CRUD.enrollment_crud import EnrollmentCRUD, enrollment_crud
from enrollments_service.boundary.db.models.enrollment_model import (
    EnrollmentModel,
    generate_enrollment_id,
)
from enrollments_service.core.exceptions import (
    EnrollmentNotFoundError,
    EnrollmentServiceError,
    EnrollmentStoreError,
)
from enrollments_service.core.validation import validate_enrollment_request
from enrollments_service.models.enrollment import EnrollmentRequest
from enrollments_service.models.snapshots import CourseSnapshot, StudentSnapshot

logger = logging.getLogger(__name__)


def serialize_enrollment(enrollment: EnrollmentModel) -> dict[str, Any]:
    """Detach an enrollment row into a plain dict."""
    return {
        "enrollment_id": enrollment.enrollment_id,
        "enrollment_year": enrollment.enrollment_year,
        "semester": enrollment.semester,
        "student_id": enrollment.student_id,
        "student_first_name": enrollment.student_first_name,
        "student_last_name": enrollment.student_last_name,
        "course_id": enrollment.course_id,
        "course_number": enrollment.course_number,
        "course_name": enrollment.course_name,
        "created_at": enrollment.created_at,
        "updated_at": enrollment.updated_at,
    }


def apply_snapshots(
    enrollment: EnrollmentModel,
    request: EnrollmentRequest,
    student: StudentSnapshot,
    course: CourseSnapshot,
) -> EnrollmentModel:
    """Copy request fields and denormalized snapshot fields onto an enrollment."""
    enrollment.enrollment_year = request.enrollment_year
    enrollment.semester = request.semester
    enrollment.student_id = student.student_id
    enrollment.student_first_name = student.first_name
    enrollment.student_last_name = student.last_name
    enrollment.course_id = course.course_id
    enrollment.course_number = course.course_number
    enrollment.course_name = course.course_name
    return enrollment


class EnrollmentService:
    """Enrollment service orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        student_client: StudentServiceClient,
        course_client: CourseServiceClient,
        store: EnrollmentCRUD = enrollment_crud,
        concurrent_lookups: bool = False,
    ) -> None:
        """
        Initialize enrollment service.

        Args:
            db: Async SQLAlchemy session (one per request)
            student_client: Students service client
            course_client: Courses service client
            store: Enrollment store
            concurrent_lookups: Dispatch both lookups at once instead of in order
        """
        self.db = db
        self.student_client = student_client
        self.course_client = course_client
        self.store = store
        self.concurrent_lookups = concurrent_lookups

    async def _resolve_references(
        self,
        student_id: str,
        course_id: str,
    ) -> tuple[StudentSnapshot, CourseSnapshot]:
        """
        Confirm both referenced entities exist and return their snapshots.

        The student outcome is always acted on first: if the student lookup
        fails its error is raised even when the course lookup also fails.
        Sequentially, no course lookup is issued at all; concurrently, the
        course task is cancelled.

        Raises:
            StudentNotFoundError, InvalidStudentIdError: Student rejected
            CourseNotFoundError, InvalidCourseIdError: Course rejected
            RemoteServiceError: Either service failed
        """
        if not self.concurrent_lookups:
            student = await self.student_client.get_student(student_id)
            course = await self.course_client.get_course(course_id)
            return student, course

        student_task = asyncio.create_task(self.student_client.get_student(student_id))
        course_task = asyncio.create_task(self.course_client.get_course(course_id))
        try:
            student = await student_task
            course = await course_task
        finally:
            for task in (student_task, course_task):
                if not task.done():
                    task.cancel()
            # Settle both tasks so a losing failure is not reported as unhandled.
            await asyncio.gather(student_task, course_task, return_exceptions=True)
        return student, course

    async def _commit(self) -> None:
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            raise EnrollmentStoreError(f"Failed to commit enrollment: {e}") from e

    async def _rollback(self) -> None:
        try:
            await self.db.rollback()
        except SQLAlchemyError:
            logger.exception("Rollback failed")

    async def add_enrollment(self, request: EnrollmentRequest) -> dict:
        """
        Validate, enrich and persist a new enrollment.

        Args:
            request: Incoming enrollment request

        Returns:
            dict: Persisted enrollment

        Raises:
            EnrollmentValidationError: Required field missing (no I/O performed)
            StudentNotFoundError, InvalidStudentIdError: Student rejected
            CourseNotFoundError, InvalidCourseIdError: Course rejected
            RemoteServiceError: A remote service failed
            EnrollmentConflictError: Generated id already stored
            EnrollmentStoreError: Store failed
        """
        validate_enrollment_request(request)

        student, course = await self._resolve_references(request.student_id, request.course_id)

        enrollment = apply_snapshots(
            EnrollmentModel(enrollment_id=generate_enrollment_id()),
            request,
            student,
            course,
        )

        try:
            enrollment = await self.store.create(self.db, enrollment)
            await self._commit()
        except EnrollmentServiceError:
            await self._rollback()
            raise
        except SQLAlchemyError as e:
            await self._rollback()
            logger.error(
                "Failed to add enrollment",
                extra={"error": str(e), "enrollment_id": enrollment.enrollment_id},
            )
            raise EnrollmentStoreError(f"Failed to add enrollment: {e}") from e

        logger.info(
            "Enrollment added",
            extra={
                "enrollment_id": enrollment.enrollment_id,
                "student_id": enrollment.student_id,
                "course_id": enrollment.course_id,
            },
        )
        return serialize_enrollment(enrollment)

    async def update_enrollment(self, enrollment_id: str, request: EnrollmentRequest) -> dict:
        """
        Re-validate and re-enrich an existing enrollment in place.

        The enrollment must exist before any remote lookup is made. The
        identifier never changes.

        Args:
            enrollment_id: Existing enrollment id
            request: Replacement year, semester, student and course

        Returns:
            dict: Updated enrollment

        Raises:
            EnrollmentValidationError: Required field missing
            EnrollmentNotFoundError: No enrollment with that id
            StudentNotFoundError, InvalidStudentIdError: Student rejected
            CourseNotFoundError, InvalidCourseIdError: Course rejected
            RemoteServiceError: A remote service failed
            EnrollmentStoreError: Store failed
        """
        validate_enrollment_request(request)

        existing = await self._find(enrollment_id)
        if existing is None:
            raise EnrollmentNotFoundError(enrollment_id)

        student, course = await self._resolve_references(request.student_id, request.course_id)

        try:
            enrollment = await self.store.save(self.db, apply_snapshots(existing, request, student, course))
            await self._commit()
        except EnrollmentServiceError:
            await self._rollback()
            raise
        except SQLAlchemyError as e:
            await self._rollback()
            logger.error(
                "Failed to update enrollment",
                extra={"error": str(e), "enrollment_id": enrollment_id},
            )
            raise EnrollmentStoreError(f"Failed to update enrollment: {e}") from e

        logger.info(
            "Enrollment updated",
            extra={
                "enrollment_id": enrollment_id,
                "semester": enrollment.semester.value,
                "enrollment_year": enrollment.enrollment_year,
            },
        )
        return serialize_enrollment(enrollment)

    async def _find(self, enrollment_id: str) -> EnrollmentModel | None:
        try:
            return await self.store.get_by_id(self.db, enrollment_id)
        except SQLAlchemyError as e:
            logger.error(
                "Failed to load enrollment",
                extra={"error": str(e), "enrollment_id": enrollment_id},
            )
            raise EnrollmentStoreError(f"Failed to load enrollment: {e}") from e

    async def get_enrollment(self, enrollment_id: str) -> dict:
        """
        Get enrollment by id.

        Raises:
            EnrollmentNotFoundError: No enrollment with that id
        """
        enrollment = await self._find(enrollment_id)
        if enrollment is None:
            raise EnrollmentNotFoundError(enrollment_id)
        return serialize_enrollment(enrollment)

    async def stream_enrollments(self) -> AsyncIterator[dict]:
        """Yield every stored enrollment."""
        try:
            async for enrollment in self.store.stream_all(self.db):
                yield serialize_enrollment(enrollment)
        except SQLAlchemyError as e:
            logger.error("Failed to stream enrollments", extra={"error": str(e)})
            raise EnrollmentStoreError(f"Failed to stream enrollments: {e}") from e

    async def count_enrollments(self) -> int:
        """Number of stored enrollments."""
        try:
            return await self.store.count(self.db)
        except SQLAlchemyError as e:
            raise EnrollmentStoreError(f"Failed to count enrollments: {e}") from e

    async def delete_enrollment(self, enrollment_id: str) -> dict:
        """
        Delete enrollment by id.

        Returns:
            dict: The enrollment as it was before deletion

        Raises:
            EnrollmentNotFoundError: No enrollment with that id
            EnrollmentStoreError: Store failed
        """
        enrollment = await self._find(enrollment_id)
        if enrollment is None:
            raise EnrollmentNotFoundError(enrollment_id)

        deleted = serialize_enrollment(enrollment)
        try:
            await self.store.delete(self.db, enrollment)
            await self._commit()
        except EnrollmentServiceError:
            await self._rollback()
            raise
        except SQLAlchemyError as e:
            await self._rollback()
            raise EnrollmentStoreError(f"Failed to delete enrollment: {e}") from e

        logger.info("Enrollment deleted", extra={"enrollment_id": enrollment_id})
        return deleted
