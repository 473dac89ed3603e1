"""
Courses service client.

Dependencies: enrollments_service.boundary.clients.base_client
System role: Course existence check and snapshot source
"""

from enrollments_service.boundary.clients.base_client import RemoteLookupClient
from enrollments_service.core.exceptions import CourseNotFoundError, InvalidCourseIdError
from enrollments_service.models.snapshots import CourseSnapshot


class CourseServiceClient(RemoteLookupClient[CourseSnapshot]):
    """Looks up courses via GET /api/v1/courses/{course_id}."""

    service_name = "Courses"
    resource_path = "/api/v1/courses"
    snapshot_model = CourseSnapshot
    not_found_error = CourseNotFoundError
    invalid_id_error = InvalidCourseIdError

    async def get_course(self, course_id: str) -> CourseSnapshot:
        """Fetch the course snapshot, raising CourseNotFoundError/InvalidCourseIdError."""
        return await self.fetch(course_id)
