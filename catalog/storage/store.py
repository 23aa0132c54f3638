"""
SQL-backed record store for authors and books.

Each operation opens its own session from the session factory, so the
controller can await two reads at once with ``asyncio.gather`` without two
coroutines sharing one ``AsyncSession``. Writes commit before returning; a
failed operation is rolled back and raised as ``DatabaseError``.

Example:
    ```python
    from catalog.storage.db import async_session
    from catalog.storage.store import CatalogStore

    store = CatalogStore(async_session)
    lookup, books = await asyncio.gather(
        store.find_by_id(author_id), store.find_projected(author_id)
    )
    ```
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.exceptions import DatabaseError
from catalog.logging import logger
from catalog.models.author import Author
from catalog.models.book import Book
from catalog.repositories.author_repository import AuthorRepository
from catalog.repositories.book_repository import BookRepository
from catalog.schemas.author import BookSummary
from catalog.schemas.lookup import Found, Missing, MissingType


class CatalogStore:
    """
    Record store implementation on top of SQLModel repositories.

    Attributes:
        session_factory: Factory producing a fresh AsyncSession per call.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    @asynccontextmanager
    async def _session(self, commit: bool = False) -> AsyncIterator[AsyncSession]:
        async with self.session_factory() as session:
            try:
                yield session
                if commit:
                    await session.commit()
            except SQLAlchemyError as ex:
                await session.rollback()
                logger.error(f"Database error: {ex}", exc_info=True)
                raise DatabaseError("Database error occurred") from ex

    async def find_sorted(self, sort_key: str = "family_name") -> list[Author]:
        async with self._session() as session:
            return await AuthorRepository(session).get_sorted(sort_key)

    async def find_by_id(self, author_id: int) -> Found[Author] | MissingType:
        async with self._session() as session:
            author = await AuthorRepository(session).get_by_id(author_id)
        return Missing if author is None else Found(author)

    async def find_projected(self, author_id: int) -> list[BookSummary]:
        async with self._session() as session:
            return await BookRepository(session).get_summaries_by_author(
                author_id
            )

    async def find_books(self, author_id: int) -> list[Book]:
        async with self._session() as session:
            return await BookRepository(session).get_by_author(author_id)

    async def insert(self, author: Author) -> Author:
        async with self._session(commit=True) as session:
            created = await AuthorRepository(session).create(author)
        logger.info(f"Created author {created.id}")
        return created

    async def insert_book(self, book: Book) -> Book:
        async with self._session(commit=True) as session:
            return await BookRepository(session).create(book)

    async def update_by_id(
        self, author_id: int, fields: dict[str, Any]
    ) -> Found[Author] | MissingType:
        async with self._session(commit=True) as session:
            author = await AuthorRepository(session).update_by_id(
                author_id, fields
            )
        if author is None:
            logger.warning(f"Author {author_id} vanished before update")
            return Missing
        logger.info(f"Updated author {author_id}")
        return Found(author)

    async def delete_by_id(self, author_id: int) -> None:
        async with self._session(commit=True) as session:
            deleted = await AuthorRepository(session).delete_by_id(author_id)
        if deleted:
            logger.info(f"Deleted author {author_id}")
