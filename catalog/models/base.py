"""
Base model for all database tables with async relationship support.

All SQLModel table models should inherit from BaseModel. It includes
SQLAlchemy's AsyncAttrs mixin so lazy-loaded attributes can be awaited
through ``awaitable_attrs`` instead of raising MissingGreenlet errors in
async contexts.
"""

from datetime import date

from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlmodel import SQLModel


class BaseModel(SQLModel, AsyncAttrs):  # type: ignore[misc]
    """
    Base model for all database tables with async relationship support.

    Example:
        class Book(BaseModel, table=True):
            id: int | None = Field(default=None, primary_key=True)
            title: str
            author_id: int = Field(foreign_key="author.id")
    """

    pass


def format_date(value: date | None) -> str:
    """Render a date as ``Dec 16, 1775``; empty string when absent."""
    if value is None:
        return ""
    return f"{value:%b} {value.day}, {value.year}"


def iso_date(value: date | None) -> str:
    """Render a date as ``YYYY-MM-DD`` for form inputs."""
    if value is None:
        return ""
    return value.isoformat()
