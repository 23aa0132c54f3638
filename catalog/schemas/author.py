from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from catalog.constants import AUTHOR_URL_TEMPLATE
from catalog.models.author import Author
from catalog.models.base import format_date, iso_date


class AuthorDraft(BaseModel):  # type: ignore[misc]
    """
    Candidate author assembled from sanitized form values.

    A draft exists whether or not validation passed, so a rejected form can
    be shown again with the user's input. It only becomes an ``Author``
    record through ``to_record()`` or an update by id.
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = Field(default=None, description="Identity, path id on update")
    first_name: str | None = None
    family_name: str | None = None
    date_of_birth: date | None = None
    date_of_death: date | None = None

    @classmethod
    def from_values(
        cls, values: dict[str, Any], id: int | None = None
    ) -> "AuthorDraft":
        """
        Build a draft from sanitized values.

        Args:
            values: Sanitized field values keyed by form field name.
            id: Identity to carry; never read from ``values``.

        Returns:
            AuthorDraft with every known field copied over.
        """
        return cls(
            id=id,
            first_name=values.get("first_name"),
            family_name=values.get("family_name"),
            date_of_birth=values.get("date_of_birth"),
            date_of_death=values.get("date_of_death"),
        )

    def fields(self) -> dict[str, Any]:
        """Persistable attributes, identity excluded."""
        return self.model_dump(exclude={"id"})

    def to_record(self) -> Author:
        """Unsaved Author record carrying this draft's attributes."""
        return Author(**self.fields())

    @property
    def name(self) -> str:
        if not self.first_name or not self.family_name:
            return ""
        return f"{self.family_name}, {self.first_name}"

    @property
    def url(self) -> str | None:
        if self.id is None:
            return None
        return AUTHOR_URL_TEMPLATE.format(id=self.id)

    def to_view(self) -> dict[str, Any]:
        return {
            **self.model_dump(mode="json"),
            "name": self.name,
            "url": self.url,
            "date_of_birth_iso": iso_date(self.date_of_birth),
            "date_of_death_iso": iso_date(self.date_of_death),
            "date_of_birth_formatted": format_date(self.date_of_birth),
            "date_of_death_formatted": format_date(self.date_of_death),
        }


class BookSummary(BaseModel):  # type: ignore[misc]
    """Projection of a book used by the author detail and delete views."""

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    summary: str = ""

    def to_view(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
