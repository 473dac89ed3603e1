"""
Test suite for the course and student lookup clients.

Remote services are simulated with httpx.MockTransport so every status
code path runs through the real HTTP client.

System role: Verification of outbound adapter error mapping
"""

import httpx
import pytest

from enrollments_service.boundary.clients import CourseServiceClient, StudentServiceClient
from enrollments_service.core.exceptions import (
    CourseNotFoundError,
    InvalidCourseIdError,
    InvalidStudentIdError,
    RemoteServiceError,
    RemoteServiceUnavailableError,
    StudentNotFoundError,
)
from enrollments_service.observability.correlation import clear_correlation_id, set_correlation_id

STUDENT_JSON = {
    "studentId": "S1",
    "firstName": "Donna",
    "lastName": "Hornsby",
    "program": "Computer Science",
    "stuff": "ignored",
}

COURSE_JSON = {
    "courseId": "C1",
    "courseNumber": "N45-LA",
    "courseName": "Web Services",
    "numHours": 60,
    "numCredits": 3.0,
    "department": "Computer Science",
}


def make_student_client(handler, retry_attempts: int = 1) -> StudentServiceClient:
    return StudentServiceClient(
        base_url="http://students.test",
        retry_attempts=retry_attempts,
        retry_backoff_seconds=0,
        transport=httpx.MockTransport(handler),
    )


def make_course_client(handler, retry_attempts: int = 1) -> CourseServiceClient:
    return CourseServiceClient(
        base_url="http://courses.test/",
        retry_attempts=retry_attempts,
        retry_backoff_seconds=0,
        transport=httpx.MockTransport(handler),
    )


class TestStudentServiceClient:
    """Test suite for StudentServiceClient.get_student()."""

    @pytest.mark.asyncio
    async def test_ok_returns_snapshot(self) -> None:
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.path)
            return httpx.Response(200, json=STUDENT_JSON)

        client = make_student_client(handler)
        student = await client.get_student("S1")
        await client.aclose()

        assert seen == ["/api/v1/students/S1"]
        assert student.student_id == "S1"
        assert student.first_name == "Donna"
        assert student.last_name == "Hornsby"

    @pytest.mark.asyncio
    async def test_404_raises_student_not_found(self) -> None:
        client = make_student_client(lambda request: httpx.Response(404))

        with pytest.raises(StudentNotFoundError) as exc_info:
            await client.get_student("S-404")

        assert exc_info.value.message == "Student with id=S-404 is not found"

    @pytest.mark.asyncio
    async def test_422_raises_invalid_student_id(self) -> None:
        client = make_student_client(lambda request: httpx.Response(422, json={"message": "bad"}))

        with pytest.raises(InvalidStudentIdError) as exc_info:
            await client.get_student("not-a-uuid")

        assert exc_info.value.message == "Student id=not-a-uuid is invalid"

    @pytest.mark.asyncio
    async def test_5xx_is_infrastructure_not_not_found(self) -> None:
        client = make_student_client(lambda request: httpx.Response(500))

        with pytest.raises(RemoteServiceError) as exc_info:
            await client.get_student("S1")

        assert not isinstance(exc_info.value, RemoteServiceUnavailableError)
        assert exc_info.value.status_code == 500
        assert exc_info.value.service == "Students"

    @pytest.mark.asyncio
    async def test_connection_failure_raises_unavailable(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = make_student_client(handler)

        with pytest.raises(RemoteServiceUnavailableError):
            await client.get_student("S1")

    @pytest.mark.asyncio
    async def test_timeout_raises_unavailable(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        client = make_student_client(handler)

        with pytest.raises(RemoteServiceUnavailableError) as exc_info:
            await client.get_student("S1")

        assert "timed out" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_transport_failures_are_retried(self) -> None:
        attempts = []

        def handler(request: httpx.Request) -> httpx.Response:
            attempts.append(request)
            if len(attempts) < 3:
                raise httpx.ConnectError("connection refused", request=request)
            return httpx.Response(200, json=STUDENT_JSON)

        client = make_student_client(handler, retry_attempts=3)
        student = await client.get_student("S1")

        assert len(attempts) == 3
        assert student.student_id == "S1"

    @pytest.mark.asyncio
    async def test_http_errors_are_not_retried(self) -> None:
        attempts = []

        def handler(request: httpx.Request) -> httpx.Response:
            attempts.append(request)
            return httpx.Response(503)

        client = make_student_client(handler, retry_attempts=3)

        with pytest.raises(RemoteServiceError):
            await client.get_student("S1")

        assert len(attempts) == 1

    @pytest.mark.asyncio
    async def test_malformed_body_is_infrastructure_error(self) -> None:
        client = make_student_client(lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(RemoteServiceError) as exc_info:
            await client.get_student("S1")

        assert "malformed" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_forwards_correlation_id(self) -> None:
        headers = []

        def handler(request: httpx.Request) -> httpx.Response:
            headers.append(request.headers.get("X-Correlation-ID"))
            return httpx.Response(200, json=STUDENT_JSON)

        client = make_student_client(handler)
        set_correlation_id("corr-123")
        try:
            await client.get_student("S1")
        finally:
            clear_correlation_id()

        assert headers == ["corr-123"]


class TestCourseServiceClient:
    """Test suite for CourseServiceClient.get_course()."""

    @pytest.mark.asyncio
    async def test_ok_returns_snapshot(self) -> None:
        client = make_course_client(lambda request: httpx.Response(200, json=COURSE_JSON))

        course = await client.get_course("C1")

        assert course.course_id == "C1"
        assert course.course_number == "N45-LA"
        assert course.course_name == "Web Services"

    @pytest.mark.asyncio
    async def test_404_raises_course_not_found(self) -> None:
        client = make_course_client(lambda request: httpx.Response(404))

        with pytest.raises(CourseNotFoundError) as exc_info:
            await client.get_course("C-404")

        assert exc_info.value.message == "Course with id=C-404 is not found"

    @pytest.mark.asyncio
    async def test_422_raises_invalid_course_id(self) -> None:
        client = make_course_client(lambda request: httpx.Response(422))

        with pytest.raises(InvalidCourseIdError) as exc_info:
            await client.get_course("123")

        assert exc_info.value.message == "Course id=123 is invalid"

    @pytest.mark.asyncio
    async def test_identifier_is_path_escaped(self) -> None:
        paths = []

        def handler(request: httpx.Request) -> httpx.Response:
            paths.append(request.url.raw_path)
            return httpx.Response(404)

        client = make_course_client(handler)

        with pytest.raises(CourseNotFoundError):
            await client.get_course("a/b")

        assert paths == [b"/api/v1/courses/a%2Fb"]
