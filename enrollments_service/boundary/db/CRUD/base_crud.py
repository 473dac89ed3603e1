"""
Base CRUD operations for SQLAlchemy models.

Provides generic Create, Read, Update, Delete operations that can be
inherited and extended by model-specific CRUD classes.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Any, AsyncIterator, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from enrollments_service.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Provides standard database operations that work with any SQLAlchemy model.
    Subclasses specify the model class and its primary key attribute and can
    override or extend these methods for model-specific behavior.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
        id_attribute: Name of the primary key attribute
    """

    def __init__(self, model: type[ModelT], id_attribute: str = "id") -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
            id_attribute: Primary key attribute name on the model
        """
        self.model = model
        self.id_attribute = id_attribute

    @property
    def _id_column(self):
        return getattr(self.model, self.id_attribute)

    async def create(self, session: AsyncSession, instance: ModelT) -> ModelT:
        """
        Insert a new record.

        Args:
            session: Async database session
            instance: Transient model instance

        Returns:
            The inserted instance with defaults populated

        Raises:
            IntegrityError: If the primary key is already taken
        """
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def save(self, session: AsyncSession, instance: ModelT) -> ModelT:
        """
        Insert or overwrite a record by primary key.

        Args:
            session: Async database session
            instance: Model instance, attached or detached

        Returns:
            The persistent instance
        """
        merged = await session.merge(instance)
        await session.flush()
        await session.refresh(merged)
        return merged

    async def get_by_id(self, session: AsyncSession, id: Any) -> ModelT | None:
        """
        Retrieve a single record by primary key.

        Args:
            session: Async database session
            id: Primary key value

        Returns:
            Model instance if found, None otherwise
        """
        stmt = select(self.model).where(self._id_column == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def stream_all(self, session: AsyncSession) -> AsyncIterator[ModelT]:
        """
        Stream all records without loading the full result set.

        Args:
            session: Async database session

        Yields:
            Model instances one at a time
        """
        result = await session.stream_scalars(select(self.model).order_by(self._id_column))
        async for instance in result:
            yield instance

    async def delete(self, session: AsyncSession, instance: ModelT) -> None:
        """
        Delete a persistent record.

        Args:
            session: Async database session
            instance: Persistent model instance
        """
        await session.delete(instance)
        await session.flush()

    async def count(self, session: AsyncSession) -> int:
        """
        Count all records.

        Args:
            session: Async database session

        Returns:
            Number of rows in the model's table
        """
        stmt = select(func.count()).select_from(self.model)
        result = await session.execute(stmt)
        return result.scalar_one()
