"""Base repository for database operations."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from blog_backend.errors.database import DatabaseError, DuplicateEntryError


class BaseRepository[ModelT: SQLModel]:
    """
    Base repository implementing the lookups and writes shared by all entities.

    Writes are committed immediately so store failures surface inside the
    calling route rather than when the session is torn down.

    Attributes:
        model: The SQLModel database model type.
    """

    model: type[ModelT]

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def get_by_id(self, record_id: UUID) -> ModelT | None:
        """
        Get a record by its ID.

        Args:
            record_id: Record UUID

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        statement = select(self.model).where(self.model.id == record_id)  # type: ignore[attr-defined]
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def delete(self, record: ModelT) -> None:
        """
        Hard-delete a record. Nothing referencing it is touched.

        Args:
            record: Record to delete
        """
        await self.session.delete(record)
        await self.session.commit()

    async def _save(self, record: ModelT) -> ModelT:
        """
        Add a record, commit and refresh it from the database.

        Args:
            record: Record to save

        Returns:
            ModelT: Refreshed record

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            DatabaseError: For other integrity errors
        """
        try:
            self.session.add(record)
            await self.session.commit()
            await self.session.refresh(record)
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            if "unique" in error_msg.lower() or "duplicate" in error_msg.lower():
                raise DuplicateEntryError(detail=error_msg) from e
            raise DatabaseError(detail=f"Database integrity error: {error_msg}") from e
        return record
