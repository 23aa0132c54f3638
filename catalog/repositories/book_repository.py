"""
Repository for Book entity.

Books own the relation to their author, so every "books of an author"
question is answered here by filtering on ``Book.author_id``.
"""

from typing import Sequence

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.constants import BOOK_SUMMARY_FIELDS
from catalog.models.book import Book
from catalog.repositories.base import BaseRepository
from catalog.schemas.author import BookSummary


class BookRepository(BaseRepository[Book]):
    """Repository for Book entity operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Book)

    async def get_by_author(self, author_id: int) -> list[Book]:
        """Get full book records referencing ``author_id``."""
        return await self.get_all(author_id=author_id)

    async def get_summaries_by_author(
        self,
        author_id: int,
        fields: Sequence[str] = BOOK_SUMMARY_FIELDS,
    ) -> list[BookSummary]:
        """
        Get a projection of the books referencing ``author_id``.

        Only the id and the requested columns are loaded.

        Args:
            author_id: Identity of the author.
            fields: Book columns to include besides the id.

        Returns:
            List of BookSummary values.
        """
        columns = [getattr(Book, name) for name in fields]
        stmt = select(Book.id, *columns).where(Book.author_id == author_id)
        result = await self.session.exec(stmt)
        return [BookSummary(**dict(row._mapping)) for row in result.all()]
