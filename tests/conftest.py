"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory async database, remote client doubles, sample snapshots
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid
from unittest.mock import AsyncMock

import pytest

from enrollments_service.boundary.clients import CourseServiceClient, StudentServiceClient
from enrollments_service.models.enrollment import EnrollmentRequest, Semester
from enrollments_service.models.snapshots import CourseSnapshot, StudentSnapshot


@pytest.fixture
async def test_engine():
    """
    Create in-memory SQLite async engine with all tables.

    Yields:
        AsyncEngine: Engine bound to a single shared in-memory connection
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool
    from enrollments_service.boundary.db.base import Base
    import enrollments_service.boundary.db.models  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    """Session factory bound to the in-memory engine."""
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_async_db(test_session_factory):
    """
    Create a session on the in-memory SQLite database.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    async with test_session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def student_snapshot() -> StudentSnapshot:
    """Student returned by the students service."""
    return StudentSnapshot(
        student_id="c3540a89-cb47-4c96-888e-ff96708db4d8",
        first_name="Donna",
        last_name="Hornsby",
        program="Computer Science",
    )


@pytest.fixture
def course_snapshot() -> CourseSnapshot:
    """Course returned by the courses service."""
    return CourseSnapshot(
        course_id="9a29fff7-564a-4cc9-8fe1-36f6ca9bc223",
        course_number="N45-LA",
        course_name="Web Services",
        num_hours=60,
        num_credits=3.0,
        department="Computer Science",
    )


@pytest.fixture
def enrollment_request(student_snapshot, course_snapshot) -> EnrollmentRequest:
    """Complete enrollment request referencing the sample student and course."""
    return EnrollmentRequest(
        enrollment_year=2023,
        semester=Semester.FALL,
        student_id=student_snapshot.student_id,
        course_id=course_snapshot.course_id,
    )


@pytest.fixture
def mock_student_client(student_snapshot) -> AsyncMock:
    """Students service client double resolving the sample student."""
    client = AsyncMock(spec=StudentServiceClient)
    client.get_student.return_value = student_snapshot
    return client


@pytest.fixture
def mock_course_client(course_snapshot) -> AsyncMock:
    """Courses service client double resolving the sample course."""
    client = AsyncMock(spec=CourseServiceClient)
    client.get_course.return_value = course_snapshot
    return client


@pytest.fixture
def enrollment_id() -> str:
    """Generate a test enrollment ID."""
    return str(uuid.uuid4())
