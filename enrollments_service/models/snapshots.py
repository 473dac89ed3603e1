"""
Remote entity snapshots.

Read-only projections of courses and students as returned by their
owning services. Unknown fields are ignored.

Dependencies: pydantic
System role: Remote lookup response contracts
"""

from pydantic import ConfigDict

from enrollments_service.models.enrollment import CamelModel


class CourseSnapshot(CamelModel):
    """Course as reported by the courses service."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    course_id: str
    course_number: str
    course_name: str
    num_hours: int | None = None
    num_credits: float | None = None
    department: str | None = None


class StudentSnapshot(CamelModel):
    """Student as reported by the students service."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    student_id: str
    first_name: str
    last_name: str
    program: str | None = None
