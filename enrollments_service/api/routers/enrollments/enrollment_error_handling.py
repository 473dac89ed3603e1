"""
Enrollment error handling utilities.

Provides a decorator that maps enrollment errors onto HTTP responses
carrying a {"message": ...} body, and the app-wide handler for request
bodies that fail to parse.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic.alias_generators import to_camel, to_snake

from enrollments_service.core.exceptions import (
    EnrollmentConflictError,
    EnrollmentServiceError,
    EnrollmentStoreError,
    EnrollmentValidationError,
    InvalidIdentifierError,
    RemoteServiceError,
    RemoteServiceUnavailableError,
    ResourceNotFoundError,
)
from enrollments_service.core.validation import REQUIRED_FIELD_CHECKS, is_present
from enrollments_service.models.common import ErrorResponse
from enrollments_service.models.enrollment import Semester

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])

# Checked in order; first match wins.
ERROR_STATUS_CODES: tuple[tuple[type[EnrollmentServiceError], int], ...] = (
    (EnrollmentValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (InvalidIdentifierError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (ResourceNotFoundError, status.HTTP_404_NOT_FOUND),
    (EnrollmentConflictError, status.HTTP_409_CONFLICT),
    (RemoteServiceUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (RemoteServiceError, status.HTTP_502_BAD_GATEWAY),
    (EnrollmentStoreError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def status_code_for(error: EnrollmentServiceError) -> int:
    """Return the HTTP status for an enrollment error."""
    for error_type, status_code in ERROR_STATUS_CODES:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(message: str, status_code: int) -> JSONResponse:
    """Build the JSON error response."""
    body = ErrorResponse(message=message, status_code=status_code)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def handle_enrollment_errors(func: F) -> F:
    """
    Decorator to handle enrollment errors and transform them into error responses.

    This centralizes:
    - Logging of errors with context
    - Mapping specific exceptions to HTTP status codes
    - Ensuring uniform error response formats
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except EnrollmentServiceError as e:
            status_code = status_code_for(e)
            if status_code >= 500:
                logger.exception(
                    "Enrollment operation failed",
                    extra={"error_type": type(e).__name__, "error": e.message},
                )
            else:
                logger.warning(
                    "Enrollment request rejected",
                    extra={"error_type": type(e).__name__, "error": e.message, "status_code": status_code},
                )
            return error_response(e.message, status_code)

        except Exception as e:
            logger.exception(
                "Unexpected failure in enrollment operation",
                extra={"error": str(e)},
            )
            return error_response(
                "An internal error occurred during enrollment operation",
                status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

    return wrapper  # type: ignore


MALFORMED_FIELD_MESSAGES = {
    "enrollment_year": "Enrollment year must be an integer",
    "semester": f"Semester must be one of {', '.join(s.value for s in Semester)}",
    "student_id": "Student id must be a string",
    "course_id": "Course id must be a string",
}


def describe_request_validation_error(exc: RequestValidationError) -> str:
    """
    Pick the single message reported for a body that failed to parse.

    Fields are examined in validation pipeline order, so a missing
    enrollment year is reported ahead of a malformed semester.
    """
    errors = exc.errors()
    malformed = {
        to_snake(error["loc"][1])
        for error in errors
        if len(error.get("loc", ())) > 1 and error["loc"][0] == "body" and isinstance(error["loc"][1], str)
    }

    if isinstance(exc.body, dict):
        for field, _check, required_message in REQUIRED_FIELD_CHECKS:
            if field in malformed:
                return MALFORMED_FIELD_MESSAGES[field]
            if not is_present(exc.body.get(to_camel(field), exc.body.get(field))):
                return required_message

    first = errors[0]
    return f"Invalid {first['loc'][-1]}: {first['msg']}"


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request parsing failures with the enrollment error body."""
    message = describe_request_validation_error(exc)
    logger.warning(
        "Enrollment request rejected",
        extra={"error_type": type(exc).__name__, "error": message, "path": request.url.path},
    )
    return error_response(message, status.HTTP_422_UNPROCESSABLE_ENTITY)
