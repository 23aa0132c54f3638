"""
Protocol classes for structural subtyping (duck typing with type safety).

``RecordStore`` is the persistence boundary of the author controller. Any
object implementing these coroutines can back the controller: the
SQL-backed ``CatalogStore`` in production, an ``AsyncMock`` in unit tests.

Example:
    ```python
    from catalog.protocols import RecordStore


    async def count_authors(store: RecordStore) -> int:
        return len(await store.find_sorted())
    ```
"""

from typing import Any, Protocol, runtime_checkable

from catalog.models.author import Author
from catalog.models.book import Book
from catalog.schemas.author import BookSummary
from catalog.schemas.lookup import Found, MissingType


@runtime_checkable
class RecordStore(Protocol):
    """
    Durable storage for authors and books.

    Every call may raise ``DatabaseError`` when the database is unavailable;
    "no record" is a normal result, never an error.
    """

    async def find_sorted(self, sort_key: str = "family_name") -> list[Author]:
        """All authors ordered ascending by ``sort_key``."""
        ...

    async def find_by_id(self, author_id: int) -> Found[Author] | MissingType:
        """The author with ``author_id``, or ``Missing``."""
        ...

    async def find_projected(self, author_id: int) -> list[BookSummary]:
        """Title and summary of every book referencing ``author_id``."""
        ...

    async def find_books(self, author_id: int) -> list[Book]:
        """Full records of every book referencing ``author_id``."""
        ...

    async def insert(self, author: Author) -> Author:
        """Persist a new author; the returned record carries its identity."""
        ...

    async def update_by_id(
        self, author_id: int, fields: dict[str, Any]
    ) -> Found[Author] | MissingType:
        """Overwrite the author's attributes; ``Missing`` if it is gone."""
        ...

    async def delete_by_id(self, author_id: int) -> None:
        """Delete the author; deleting an absent author does nothing."""
        ...


@runtime_checkable
class EventRecorder(Protocol):
    """Sink for observability events emitted by the controller."""

    def record(self, event: str, **fields: Any) -> None:
        """
        Record one event.

        Args:
            event: Event name, e.g. ``"author_listed"``.
            **fields: Event attributes.
        """
        ...
