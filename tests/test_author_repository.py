"""
Tests for AuthorRepository and BookRepository.

These tests verify that the repositories correctly interact with the
database session and provide the expected operations using mocks.
"""

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.models.author import Author
from catalog.repositories.author_repository import AuthorRepository
from catalog.repositories.book_repository import BookRepository
from catalog.schemas.author import BookSummary


@pytest.fixture
def mock_session():
    """
    Provides a mock AsyncSession for testing.

    Returns:
        AsyncMock: Mocked database session
    """
    session = AsyncMock(spec=AsyncSession)
    session.add = MagicMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.rollback = AsyncMock()
    session.exec = AsyncMock()
    session.get = AsyncMock()
    session.delete = AsyncMock()
    return session


class TestAuthorRepositoryCreate:
    """Tests for repository create operations."""

    @pytest.mark.asyncio
    async def test_create_author(self, mock_session):
        """Test creating an author."""
        repo = AuthorRepository(mock_session)
        author = Author(first_name="Jane", family_name="Austen")

        created = await repo.create(author)

        assert created == author
        mock_session.add.assert_called_once_with(author)
        mock_session.flush.assert_called_once()
        mock_session.refresh.assert_called_once_with(author)

    @pytest.mark.asyncio
    async def test_create_leaves_rollback_to_caller(self, mock_session):
        """Test write errors propagate without the repository rolling back."""
        repo = AuthorRepository(mock_session)
        mock_session.flush.side_effect = SQLAlchemyError("disk full")

        with pytest.raises(SQLAlchemyError):
            await repo.create(Author(first_name="Jane", family_name="Austen"))

        mock_session.rollback.assert_not_called()


class TestAuthorRepositoryRead:
    """Tests for repository read operations."""

    @pytest.mark.asyncio
    async def test_get_by_id_found(self, mock_session, jane_austen):
        """Test getting author by ID when exists."""
        repo = AuthorRepository(mock_session)
        mock_session.get.return_value = jane_austen

        found = await repo.get_by_id(1)

        assert found == jane_austen
        mock_session.get.assert_called_once_with(Author, 1)

    @pytest.mark.asyncio
    async def test_get_by_id_not_found(self, mock_session):
        """Test getting author by ID when doesn't exist."""
        repo = AuthorRepository(mock_session)
        mock_session.get.return_value = None

        assert await repo.get_by_id(99999) is None

    @pytest.mark.asyncio
    async def test_get_sorted(self, mock_session, jane_austen):
        """Test sorted listing returns the query result."""
        repo = AuthorRepository(mock_session)
        mock_result = MagicMock()
        mock_result.all.return_value = [jane_austen]
        mock_session.exec.return_value = mock_result

        authors = await repo.get_sorted("family_name")

        assert authors == [jane_austen]
        statement = mock_session.exec.call_args.args[0]
        assert "ORDER BY author.family_name" in str(statement)

    @pytest.mark.asyncio
    async def test_get_all_error_propagates(self, mock_session):
        """Test query errors are re-raised."""
        repo = AuthorRepository(mock_session)
        mock_session.exec.side_effect = SQLAlchemyError("connection lost")

        with pytest.raises(SQLAlchemyError):
            await repo.get_sorted()


class TestAuthorRepositoryWrite:
    """Tests for update and delete by identity."""

    @pytest.mark.asyncio
    async def test_update_by_id(self, mock_session, jane_austen):
        """Test fields are applied but the id never changes."""
        repo = AuthorRepository(mock_session)
        mock_session.get.return_value = jane_austen

        updated = await repo.update_by_id(
            1, {"id": 99, "first_name": "J.", "date_of_death": date(1817, 7, 19)}
        )

        assert updated is jane_austen
        assert updated.id == 1
        assert updated.first_name == "J."
        assert updated.date_of_death == date(1817, 7, 19)
        mock_session.flush.assert_called_once()

    @pytest.mark.asyncio
    async def test_update_by_id_missing(self, mock_session):
        """Test updating an unknown id returns None without writing."""
        repo = AuthorRepository(mock_session)
        mock_session.get.return_value = None

        assert await repo.update_by_id(5, {"first_name": "X"}) is None
        mock_session.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_by_id(self, mock_session, jane_austen):
        """Test deleting an existing author."""
        repo = AuthorRepository(mock_session)
        mock_session.get.return_value = jane_austen

        assert await repo.delete_by_id(1) is True
        mock_session.delete.assert_called_once_with(jane_austen)

    @pytest.mark.asyncio
    async def test_delete_by_id_absent(self, mock_session):
        """Test deleting an absent author is a no-op."""
        repo = AuthorRepository(mock_session)
        mock_session.get.return_value = None

        assert await repo.delete_by_id(1) is False
        mock_session.delete.assert_not_called()


class TestBookRepository:
    """Tests for book queries by author."""

    @pytest.mark.asyncio
    async def test_get_summaries_by_author(self, mock_session):
        """Test rows are mapped to BookSummary values."""
        repo = BookRepository(mock_session)
        row = MagicMock()
        row._mapping = {"id": 3, "title": "Emma", "summary": "Matchmaking"}
        mock_result = MagicMock()
        mock_result.all.return_value = [row]
        mock_session.exec.return_value = mock_result

        summaries = await repo.get_summaries_by_author(1)

        assert summaries == [BookSummary(id=3, title="Emma", summary="Matchmaking")]
        statement = str(mock_session.exec.call_args.args[0])
        assert "book.isbn" not in statement
        assert "book.author_id" in statement
