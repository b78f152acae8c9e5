"""
Generic async CRUD base.

Model-specific CRUD classes inherit primary-key reads, creation, and
deletion from BaseCRUD. Methods flush but never commit; the calling
service owns the transaction.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Generic, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from docchat.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Primary-key operations shared by every table.

    Attributes:
        model: ORM class the queries target
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **values) -> ModelT:
        """
        Insert a row and load its server/default-generated columns.

        Args:
            session: Async database session
            **values: Column values

        Returns:
            The persisted (flushed, uncommitted) instance
        """
        instance = self.model(**values)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_id(self, session: AsyncSession, id: UUID) -> ModelT | None:
        result = await session.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def get_by_ids(self, session: AsyncSession, ids: Sequence[UUID]) -> Sequence[ModelT]:
        """Rows whose id is in ``ids``, in no particular order."""
        if not ids:
            return []
        result = await session.execute(select(self.model).where(self.model.id.in_(list(ids))))
        return result.scalars().all()

    async def delete_by_id(self, session: AsyncSession, id: UUID) -> bool:
        """
        Delete by primary key.

        Returns:
            False when no row matched
        """
        result = await session.execute(delete(self.model).where(self.model.id == id))
        return result.rowcount > 0

    async def exists(self, session: AsyncSession, id: UUID) -> bool:
        result = await session.execute(select(self.model.id).where(self.model.id == id))
        return result.scalar_one_or_none() is not None
