"""
Enrollment domain models and schemas.

Request/response schemas for enrollment operations. Wire names are
camelCase; snake_case input is accepted as well.

Dependencies: pydantic
System role: Enrollment API contracts
"""

import enum
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Semester(str, enum.Enum):
    """Academic semester of an enrollment."""

    FALL = "FALL"
    WINTER = "WINTER"
    SPRING = "SPRING"
    SUMMER = "SUMMER"


class CamelModel(BaseModel):
    """Base schema serializing to camelCase and accepting either case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class EnrollmentRequest(CamelModel):
    """
    Request schema for adding or updating an enrollment.

    Every field is optional at parse time; presence is enforced by the
    ordered validation pipeline so the first missing field is reported.
    """

    enrollment_year: int | None = Field(None, description="Enrollment year")
    semester: Semester | None = Field(None, description="Semester")
    student_id: str | None = Field(None, description="Student identifier")
    course_id: str | None = Field(None, description="Course identifier")


class EnrollmentResponse(CamelModel):
    """Response schema for enrollment operations."""

    enrollment_id: str
    enrollment_year: int
    semester: Semester
    student_id: str
    student_first_name: str
    student_last_name: str
    course_id: str
    course_number: str
    course_name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
