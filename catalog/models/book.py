from typing import Any

from sqlmodel import Field

from catalog.constants import BOOK_URL_TEMPLATE
from catalog.models.base import BaseModel


class Book(BaseModel, table=True):
    """
    SQLModel representing a book in the catalog.

    A book owns the relation to its author through ``author_id``; authors
    find their books by querying this column.

    Attributes:
        id: Primary key identifier for the book
        title: Title of the book
        summary: Short description of the book
        isbn: ISBN of the edition
        author_id: Identity of the author who wrote the book
    """

    __table_args__ = {"extend_existing": True}

    id: int | None = Field(default=None, primary_key=True)
    title: str
    summary: str = ""
    isbn: str = ""
    author_id: int = Field(foreign_key="author.id", index=True)

    @property
    def url(self) -> str:
        return BOOK_URL_TEMPLATE.format(id=self.id)

    def to_view(self) -> dict[str, Any]:
        return {**self.model_dump(mode="json"), "url": self.url}
