"""
Repository for Author entity with specialized query methods.

Example:
    ```python
    from catalog.repositories.author_repository import AuthorRepository
    from catalog.storage.db import async_session

    async with async_session() as session:
        repo = AuthorRepository(session)
        authors = await repo.get_sorted("family_name")
    ```
"""

from typing import Any

from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.logging import logger
from catalog.models.author import Author
from catalog.repositories.base import BaseRepository


class AuthorRepository(BaseRepository[Author]):
    """
    Repository for Author entity operations.

    Provides CRUD operations inherited from BaseRepository plus
    sorted listing and update/delete by identity.
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session, Author)

    async def get_sorted(self, sort_key: str = "family_name") -> list[Author]:
        """
        Get every author ordered ascending by ``sort_key``.

        Ties between equal keys come back in whatever order the
        database returns them.
        """
        return await self.get_all(order_by=sort_key)

    async def update_by_id(
        self, author_id: int, fields: dict[str, Any]
    ) -> Author | None:
        """
        Overwrite the stored attributes of the author with ``author_id``.

        The identity is never taken from ``fields``.

        Args:
            author_id: Identity of the author to update.
            fields: Attribute values to store.

        Returns:
            The updated author, or None if no author has that identity.
        """
        author = await self.get_by_id(author_id)
        if author is None:
            return None

        for key, value in fields.items():
            if key == "id":
                continue
            setattr(author, key, value)
        return await self.update(author)

    async def delete_by_id(self, author_id: int) -> bool:
        """
        Delete the author with ``author_id`` if it exists.

        Returns:
            True if a record was deleted, False if it was already gone.
        """
        author = await self.get_by_id(author_id)
        if author is None:
            logger.debug(f"Author {author_id} already absent, nothing to delete")
            return False

        await self.delete(author)
        return True
