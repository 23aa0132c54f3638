from datetime import date
from typing import Any

from sqlmodel import Field

from catalog.constants import AUTHOR_URL_TEMPLATE, NAME_MAX_LENGTH
from catalog.models.base import BaseModel, format_date, iso_date


class Author(BaseModel, table=True):
    """
    SQLModel representing an author entity in the database.

    This is a clean data model without Active Record methods.
    Use AuthorRepository (or CatalogStore) for all database operations.
    The author does not track its books: books reference the author.

    Attributes:
        id: Primary key, assigned by the database on insert
        first_name: Given name(s) of the author
        family_name: Family name, the default sort key
        date_of_birth: Optional date of birth
        date_of_death: Optional date of death
    """

    __table_args__ = {"extend_existing": True}

    id: int | None = Field(default=None, primary_key=True)
    first_name: str = Field(max_length=NAME_MAX_LENGTH)
    family_name: str = Field(max_length=NAME_MAX_LENGTH, index=True)
    date_of_birth: date | None = None
    date_of_death: date | None = None

    @property
    def name(self) -> str:
        """Full name as ``family_name, first_name``; empty if a part is missing."""
        if not self.first_name or not self.family_name:
            return ""
        return f"{self.family_name}, {self.first_name}"

    @property
    def url(self) -> str:
        """Canonical URL of this author."""
        return AUTHOR_URL_TEMPLATE.format(id=self.id)

    @property
    def lifespan(self) -> str:
        if self.date_of_birth is None and self.date_of_death is None:
            return ""
        birth = self.date_of_birth.year if self.date_of_birth else ""
        death = self.date_of_death.year if self.date_of_death else ""
        return f"{birth} - {death}".strip()

    @property
    def date_of_birth_formatted(self) -> str:
        return format_date(self.date_of_birth)

    @property
    def date_of_death_formatted(self) -> str:
        return format_date(self.date_of_death)

    @property
    def date_of_birth_iso(self) -> str:
        return iso_date(self.date_of_birth)

    @property
    def date_of_death_iso(self) -> str:
        return iso_date(self.date_of_death)

    def to_view(self) -> dict[str, Any]:
        """Stored fields plus the computed ones templates use."""
        return {
            **self.model_dump(mode="json"),
            "name": self.name,
            "url": self.url,
            "lifespan": self.lifespan,
            "date_of_birth_formatted": self.date_of_birth_formatted,
            "date_of_death_formatted": self.date_of_death_formatted,
            "date_of_birth_iso": self.date_of_birth_iso,
            "date_of_death_iso": self.date_of_death_iso,
        }
