"""
Enrollment response mapping utilities.

Transforms service dictionaries into Pydantic response models and
server-sent events.

Dependencies: enrollments_service.models.enrollment
System role: Enrollment response transformation
"""

from typing import Any, AsyncIterator

from enrollments_service.models.enrollment import EnrollmentResponse


def map_enrollment_to_response(enrollment_data: dict[str, Any]) -> EnrollmentResponse:
    """
    Transform enrollment data dictionary into EnrollmentResponse.

    Args:
        enrollment_data: Dictionary containing enrollment fields

    Returns:
        EnrollmentResponse: Pydantic model for API response
    """
    return EnrollmentResponse(**enrollment_data)


async def enrollments_as_events(enrollments: AsyncIterator[dict[str, Any]]) -> AsyncIterator[str]:
    """
    Render enrollments as a text/event-stream body, one event per enrollment.

    Args:
        enrollments: Async iterator of enrollment dictionaries

    Yields:
        str: "data: <json>" events
    """
    async for enrollment in enrollments:
        payload = map_enrollment_to_response(enrollment).model_dump_json(by_alias=True)
        yield f"data: {payload}\n\n"
