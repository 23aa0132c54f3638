"""
Base repository for catalog tables.

A repository runs queries inside a session it is given and never commits
or rolls back: ``CatalogStore`` opens one session per store operation and
owns the transaction, including rollback on failure. Writes are flushed
and refreshed so generated columns (the id) are populated on return.

Example:
    ```python
    class AuthorRepository(BaseRepository[Author]):
        def __init__(self, session: AsyncSession):
            super().__init__(session, Author)
    ```
"""

from typing import Any, Generic, Type, TypeVar

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Query and write helpers for one table model.

    Attributes:
        session: Session of the current store operation.
        model: The SQLModel table class.
    """

    def __init__(self, session: AsyncSession, model: Type[T]):
        self.session = session
        self.model = model

    async def get_by_id(self, id: int) -> T | None:
        return await self.session.get(self.model, id)

    async def get_all(self, order_by: str | None = None, **filters: Any) -> list[T]:
        """
        Rows whose columns equal ``filters``, optionally sorted.

        Args:
            order_by: Column to sort ascending by.
            **filters: Column name and value pairs, e.g. ``author_id=3``.
        """
        stmt = select(self.model)
        for column, value in filters.items():
            stmt = stmt.where(getattr(self.model, column) == value)
        if order_by is not None:
            stmt = stmt.order_by(getattr(self.model, order_by).asc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, entity: T) -> T:
        return await self._write(entity)

    async def update(self, entity: T) -> T:
        return await self._write(entity)

    async def delete(self, entity: T) -> None:
        await self.session.delete(entity)
        await self.session.flush()

    async def _write(self, entity: T) -> T:
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity
