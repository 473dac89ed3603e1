"""
Students service client.

Dependencies: enrollments_service.boundary.clients.base_client
System role: Student existence check and snapshot source
"""

from enrollments_service.boundary.clients.base_client import RemoteLookupClient
from enrollments_service.core.exceptions import InvalidStudentIdError, StudentNotFoundError
from enrollments_service.models.snapshots import StudentSnapshot


class StudentServiceClient(RemoteLookupClient[StudentSnapshot]):
    """Looks up students via GET /api/v1/students/{student_id}."""

    service_name = "Students"
    resource_path = "/api/v1/students"
    snapshot_model = StudentSnapshot
    not_found_error = StudentNotFoundError
    invalid_id_error = InvalidStudentIdError

    async def get_student(self, student_id: str) -> StudentSnapshot:
        """Fetch the student snapshot, raising StudentNotFoundError/InvalidStudentIdError."""
        return await self.fetch(student_id)
