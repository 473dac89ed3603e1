"""
Remote service clients.

Exports:
  - RemoteLookupClient: Generic lookup-by-id client
  - CourseServiceClient, StudentServiceClient: Service-specific clients
"""

from enrollments_service.boundary.clients.base_client import RemoteLookupClient
from enrollments_service.boundary.clients.course_client import CourseServiceClient
from enrollments_service.boundary.clients.student_client import StudentServiceClient

__all__ = ["CourseServiceClient", "RemoteLookupClient", "StudentServiceClient"]
