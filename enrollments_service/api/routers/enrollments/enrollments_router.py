"""
Enrollment API endpoints.

Routes:
- GET /enrollments - Stream all enrollments (text/event-stream)
- GET /enrollments/{id} - Get single enrollment
- POST /enrollments - Add enrollment
- PUT /enrollments/{id} - Update enrollment
- DELETE /enrollments/{id} - Delete enrollment

Dependencies: enrollments_service.application.services, enrollments_service.models
System role: Enrollment management HTTP API
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import StreamingResponse

from enrollments_service.api.deps.dependencies import get_enrollment_service
from enrollments_service.application.services.enrollment_service import EnrollmentService
from enrollments_service.boundary.db.models.enrollment_model import ENROLLMENT_ID_LENGTH
from enrollments_service.core.exceptions import InvalidEnrollmentIdError
from enrollments_service.models.common import ErrorResponse
from enrollments_service.models.enrollment import EnrollmentRequest, EnrollmentResponse

from .enrollment_error_handling import handle_enrollment_errors
from .enrollment_responses import enrollments_as_events, map_enrollment_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/enrollments", tags=["enrollments"])

ERROR_RESPONSES = {
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
    503: {"model": ErrorResponse},
}


@router.get("", response_class=StreamingResponse)
async def stream_enrollments(
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> StreamingResponse:
    """
    Stream all enrollments as server-sent events.

    An empty store yields an empty stream.
    """
    logger.info("Streaming enrollments")
    return StreamingResponse(
        enrollments_as_events(enrollment_service.stream_enrollments()),
        media_type="text/event-stream",
    )


@router.get("/{enrollment_id}", response_model=EnrollmentResponse, responses=ERROR_RESPONSES)
@handle_enrollment_errors
async def get_enrollment(
    enrollment_id: str,
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> EnrollmentResponse:
    """
    Get single enrollment by ID.

    Args:
        enrollment_id: 36-character enrollment id
        enrollment_service: Injected EnrollmentService

    Returns:
        EnrollmentResponse: Enrollment data

    Raises:
        422: Malformed enrollment id
        404: Enrollment not found
    """
    if len(enrollment_id) != ENROLLMENT_ID_LENGTH:
        raise InvalidEnrollmentIdError(enrollment_id)

    enrollment_data = await enrollment_service.get_enrollment(enrollment_id)
    return map_enrollment_to_response(enrollment_data)


@router.post(
    "",
    response_model=EnrollmentResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
@handle_enrollment_errors
async def add_enrollment(
    request: EnrollmentRequest,
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> EnrollmentResponse:
    """
    Add an enrollment after confirming its student and course exist.

    Args:
        request: EnrollmentRequest with year, semester, studentId, courseId
        enrollment_service: Injected EnrollmentService

    Returns:
        EnrollmentResponse: Created, enriched enrollment

    Raises:
        422: Missing field or identifier rejected by a remote service
        404: Student or course not found
        502/503: Remote service failure
    """
    logger.info(
        "Adding enrollment",
        extra={"student_id": request.student_id, "course_id": request.course_id},
    )

    enrollment_data = await enrollment_service.add_enrollment(request)

    logger.info(
        "Enrollment added successfully",
        extra={"enrollment_id": enrollment_data["enrollment_id"]},
    )
    return map_enrollment_to_response(enrollment_data)


@router.put("/{enrollment_id}", response_model=EnrollmentResponse, responses=ERROR_RESPONSES)
@handle_enrollment_errors
async def update_enrollment(
    enrollment_id: str,
    request: EnrollmentRequest,
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> EnrollmentResponse:
    """
    Update an enrollment in place; its id never changes.

    Args:
        enrollment_id: Existing enrollment id
        request: Replacement year, semester, studentId, courseId
        enrollment_service: Injected EnrollmentService

    Returns:
        EnrollmentResponse: Updated enrollment

    Raises:
        404: Enrollment, student or course not found
        422: Missing field or rejected identifier
    """
    logger.info("Updating enrollment", extra={"enrollment_id": enrollment_id})

    enrollment_data = await enrollment_service.update_enrollment(enrollment_id, request)
    return map_enrollment_to_response(enrollment_data)


@router.delete("/{enrollment_id}", response_model=EnrollmentResponse, responses=ERROR_RESPONSES)
@handle_enrollment_errors
async def delete_enrollment(
    enrollment_id: str,
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> EnrollmentResponse:
    """
    Delete enrollment by ID and return it.

    Raises:
        404: Enrollment not found
    """
    logger.info("Deleting enrollment", extra={"enrollment_id": enrollment_id})

    enrollment_data = await enrollment_service.delete_enrollment(enrollment_id)
    return map_enrollment_to_response(enrollment_data)
