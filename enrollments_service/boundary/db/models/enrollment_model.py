"""
Enrollment ORM model.

Persisted enrollment aggregate with denormalized student and course
snapshot fields captured when the enrollment was last written.

Dependencies: sqlalchemy, enrollments_service.boundary.db.base
System role: Enrollment persistence
"""

import uuid

from sqlalchemy import Enum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from enrollments_service.boundary.db.base import Base, TimestampMixin
from enrollments_service.models.enrollment import Semester

ENROLLMENT_ID_LENGTH = 36


def generate_enrollment_id() -> str:
    """Return a fresh 36-character enrollment identifier."""
    return str(uuid.uuid4())


class EnrollmentModel(Base, TimestampMixin):
    """
    Enrollment ORM model.

    Student and course fields are copies taken from the remote services at
    add/update time. They are not re-synchronised afterwards.

    Attributes:
        enrollment_id: 36-char UUID string primary key, never changes
        enrollment_year: Academic year
        semester: Semester enum
        student_id: Student identifier owned by the students service
        student_first_name: Snapshot of the student's first name
        student_last_name: Snapshot of the student's last name
        course_id: Course identifier owned by the courses service
        course_number: Snapshot of the course number
        course_name: Snapshot of the course name
        created_at: Creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
    """

    __tablename__ = "enrollments"

    enrollment_id: Mapped[str] = mapped_column(
        String(ENROLLMENT_ID_LENGTH),
        primary_key=True,
        default=generate_enrollment_id,
    )
    enrollment_year: Mapped[int] = mapped_column(Integer, nullable=False)
    semester: Mapped[Semester] = mapped_column(
        Enum(Semester, name="semester", native_enum=False, length=16),
        nullable=False,
    )

    student_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    student_first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    student_last_name: Mapped[str] = mapped_column(String(255), nullable=False)

    course_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    course_number: Mapped[str] = mapped_column(String(64), nullable=False)
    course_name: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return (
            f"EnrollmentModel(enrollment_id={self.enrollment_id!r}, "
            f"student_id={self.student_id!r}, course_id={self.course_id!r})"
        )
