"""
Tests for the Author and Book models and the AuthorDraft value.

These tests cover computed display fields that are never stored.
"""

from datetime import date

from catalog.models.author import Author
from catalog.models.book import Book
from catalog.schemas.author import AuthorDraft, BookSummary


class TestAuthorComputedFields:
    """Tests for Author properties."""

    def test_name_and_url(self, jane_austen):
        """Test canonical name and URL."""
        assert jane_austen.name == "Austen, Jane"
        assert jane_austen.url == "/authors/1"

    def test_name_empty_when_part_missing(self):
        """Test name is blank if either name part is missing."""
        assert Author(first_name="", family_name="Austen").name == ""

    def test_lifespan(self, jane_austen):
        """Test lifespan shows birth and death years."""
        assert jane_austen.lifespan == "1775 - 1817"

    def test_lifespan_without_dates(self):
        """Test lifespan is blank without dates."""
        assert Author(first_name="A", family_name="B").lifespan == ""

    def test_lifespan_living_author(self):
        """Test lifespan with only a birth date."""
        author = Author(
            first_name="A", family_name="B", date_of_birth=date(1950, 1, 1)
        )

        assert author.lifespan == "1950 -"

    def test_formatted_dates(self, jane_austen):
        """Test display and form date formats."""
        assert jane_austen.date_of_birth_formatted == "Dec 16, 1775"
        assert jane_austen.date_of_death_formatted == "Jul 18, 1817"
        assert jane_austen.date_of_birth_iso == "1775-12-16"

    def test_formatted_dates_absent(self):
        """Test formatted dates are empty when not set."""
        author = Author(first_name="A", family_name="B")

        assert author.date_of_birth_formatted == ""
        assert author.date_of_death_iso == ""

    def test_to_view_includes_computed_fields(self, jane_austen):
        """Test to_view exposes stored and computed fields."""
        view = jane_austen.to_view()

        assert view["id"] == 1
        assert view["family_name"] == "Austen"
        assert view["date_of_birth"] == "1775-12-16"
        assert view["name"] == "Austen, Jane"
        assert view["url"] == "/authors/1"
        assert view["lifespan"] == "1775 - 1817"


class TestBook:
    """Tests for Book model."""

    def test_url_and_view(self):
        """Test book URL and view data."""
        book = Book(id=7, title="Emma", summary="Matchmaking", author_id=1)

        assert book.url == "/books/7"
        assert book.to_view()["author_id"] == 1
        assert book.to_view()["url"] == "/books/7"


class TestAuthorDraft:
    """Tests for the candidate author value."""

    def test_from_values_without_id(self):
        """Test a create draft has no identity."""
        draft = AuthorDraft.from_values(
            {"first_name": "Jane", "family_name": "Austen"}
        )

        assert draft.id is None
        assert draft.url is None
        assert draft.name == "Austen, Jane"

    def test_from_values_ignores_id_in_values(self):
        """Test the identity never comes from submitted values."""
        draft = AuthorDraft.from_values({"id": 99, "first_name": "Jane"}, id=3)

        assert draft.id == 3
        assert draft.url == "/authors/3"

    def test_fields_exclude_identity(self):
        """Test persistable fields never carry the id."""
        draft = AuthorDraft.from_values(
            {"first_name": "Jane", "family_name": "Austen"}, id=3
        )

        assert "id" not in draft.fields()
        assert draft.fields()["family_name"] == "Austen"

    def test_to_record(self):
        """Test conversion to an unsaved Author."""
        draft = AuthorDraft.from_values(
            {
                "first_name": "Jane",
                "family_name": "Austen",
                "date_of_birth": date(1775, 12, 16),
            },
            id=5,
        )

        record = draft.to_record()

        assert isinstance(record, Author)
        assert record.id is None
        assert record.date_of_birth == date(1775, 12, 16)

    def test_to_view_keeps_partial_input(self):
        """Test an invalid draft still renders the user's input."""
        draft = AuthorDraft.from_values({"first_name": "Jane123!"})

        view = draft.to_view()

        assert view["first_name"] == "Jane123!"
        assert view["family_name"] is None
        assert view["name"] == ""
        assert view["date_of_birth_iso"] == ""


class TestBookSummary:
    """Tests for the book projection."""

    def test_to_view(self):
        """Test summary serialization."""
        summary = BookSummary(id=1, title="Emma", summary="Matchmaking")

        assert summary.to_view() == {
            "id": 1,
            "title": "Emma",
            "summary": "Matchmaking",
        }
