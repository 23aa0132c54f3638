"""
Author lifecycle controller.

Each public coroutine handles one request intent (list, detail, create,
update, delete) and returns a presentation instruction: ``Render`` or
``Redirect``. Validation failures and blocked deletes are ordinary
renders; a missing author either raises ``NotFoundError`` or redirects to
the list, depending on the ``NotFoundPolicy`` each call site passes.

Independent reads (an author and the books referencing it) are issued
together with ``asyncio.gather`` and combined only after both finish.

Note:
    The delete guard re-checks for books at delete time, but nothing stops a
    book from being added for the author between that check and the delete.
    Closing that gap needs a conditional delete inside the store.

Example:
    ```python
    controller = AuthorController(CatalogStore(async_session))
    instruction = await controller.get_author_detail(42)
    ```
"""

import asyncio
from typing import Any, Mapping

from catalog.constants import (
    AUTHOR_LIST_URL,
    VIEW_AUTHOR_DELETE,
    VIEW_AUTHOR_DETAIL,
    VIEW_AUTHOR_FORM,
    VIEW_AUTHOR_LIST,
)
from catalog.exceptions import IdentityMismatchError, NotFoundError
from catalog.logging import logger
from catalog.models.author import Author
from catalog.models.book import Book
from catalog.observability import LoggingEventRecorder
from catalog.protocols import EventRecorder, RecordStore
from catalog.schemas.author import AuthorDraft, BookSummary
from catalog.schemas.lookup import Found, MissingType, NotFoundPolicy
from catalog.schemas.presentation import Redirect, Render
from catalog.settings import app_settings
from catalog.validation import AuthorForm, CreateAuthorForm, validate


class AuthorController:
    """
    Orchestrates reads and writes of authors against a record store.

    Attributes:
        store: Persistence collaborator (see ``RecordStore``).
        recorder: Observability sink for listed authors.
        strict_delete_id_check: Reject deletes whose submitted author id
            differs from the path id.
    """

    def __init__(
        self,
        store: RecordStore,
        recorder: EventRecorder | None = None,
        strict_delete_id_check: bool | None = None,
    ):
        self.store = store
        self.recorder = recorder or LoggingEventRecorder()
        if strict_delete_id_check is None:
            strict_delete_id_check = app_settings.STRICT_DELETE_ID_CHECK
        self.strict_delete_id_check = strict_delete_id_check

    # ------------------------------------------------------------------
    # Read paths
    # ------------------------------------------------------------------

    async def list_authors(self) -> Render:
        """All authors ordered by family name."""
        authors = await self.store.find_sorted("family_name")

        for author in authors:
            self._record_listed(author)

        return Render(
            view=VIEW_AUTHOR_LIST,
            data={"title": "Author List", "author_list": authors},
        )

    async def get_author_detail(self, author_id: int) -> Render:
        """
        Author with the summaries of its books.

        Raises:
            NotFoundError: If no author has ``author_id``.
        """
        lookup, books = await self._fetch_with_summaries(author_id)
        author = self._require(lookup, NotFoundPolicy.RAISE)

        return Render(
            view=VIEW_AUTHOR_DETAIL,
            data={
                "title": "Author Detail",
                "author": author,
                "author_books": books,
            },
        )

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def render_create_form(self) -> Render:
        return Render(view=VIEW_AUTHOR_FORM, data={"title": "Create Author"})

    async def create_author(self, form: Mapping[str, Any]) -> Render | Redirect:
        """
        Validate the submitted fields and persist a new author.

        Args:
            form: Submitted values for first_name, family_name,
                date_of_birth and date_of_death.

        Returns:
            Redirect to the new author, or the form with its errors.
        """
        result = validate(CreateAuthorForm, form)
        draft = AuthorDraft.from_values(result.values)

        if not result.is_valid:
            logger.info(
                f"Rejected author create with {len(result.errors)} field error(s)"
            )
            return Render(
                view=VIEW_AUTHOR_FORM,
                data={
                    "title": "Create Author",
                    "author": draft,
                    "errors": result.errors,
                },
            )

        created = await self.store.insert(draft.to_record())
        return Redirect(location=created.url)

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    async def render_delete_confirmation(self, author_id: int) -> Render | Redirect:
        """
        Author and its books for the delete confirmation page.

        A missing author is not an error here: there is nothing left to
        delete, so the client goes back to the list.
        """
        lookup, books = await self._fetch_with_summaries(author_id)
        return self._confirmation(lookup, books)

    async def delete_author(
        self, author_id: int, submitted_author_id: int | str | None
    ) -> Render | Redirect:
        """
        Delete an author that no book references.

        The book check is re-run here rather than trusted from the
        confirmation page, against the author that is about to be deleted.
        While books remain, the confirmation page is returned again and
        nothing is deleted.

        Args:
            author_id: Id from the request path.
            submitted_author_id: Id carried by the submitted form.

        Raises:
            IdentityMismatchError: If strict checking is enabled and the two
                ids differ.
        """
        target_id = self._delete_target(author_id, submitted_author_id)

        lookup, books = await self._fetch_with_summaries(target_id)
        if books:
            logger.info(
                f"Refusing to delete author {target_id}: {len(books)} book(s) reference it"
            )
            return self._confirmation(lookup, books)

        await self.store.delete_by_id(target_id)
        return Redirect(location=AUTHOR_LIST_URL)

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    async def render_update_form(self, author_id: int) -> Render:
        """
        Update form pre-filled with the stored author and its books.

        Raises:
            NotFoundError: If no author has ``author_id``.
        """
        lookup, books = await asyncio.gather(
            self.store.find_by_id(author_id),
            self.store.find_books(author_id),
        )
        author = self._require(lookup, NotFoundPolicy.RAISE)

        return Render(
            view=VIEW_AUTHOR_FORM,
            data={
                "title": "Update Author",
                "author": author,
                "author_books": books,
            },
        )

    async def update_author(
        self, author_id: int, form: Mapping[str, Any]
    ) -> Render | Redirect:
        """
        Validate the submitted fields and overwrite the stored author.

        The identity always comes from the path, never from the form.

        Raises:
            NotFoundError: If the author disappeared before the update.
        """
        result = validate(AuthorForm, form)
        draft = AuthorDraft.from_values(result.values, id=author_id)

        if not result.is_valid:
            books = await self.store.find_books(author_id)
            return Render(
                view=VIEW_AUTHOR_FORM,
                data={
                    "title": "Update Author",
                    "author": draft,
                    "author_books": books,
                    "errors": result.errors,
                },
            )

        lookup = await self.store.update_by_id(author_id, draft.fields())
        self._require(lookup, NotFoundPolicy.RAISE)
        return Redirect(location=draft.url)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _fetch_with_summaries(
        self, author_id: int
    ) -> tuple[Found[Author] | MissingType, list[BookSummary]]:
        lookup, books = await asyncio.gather(
            self.store.find_by_id(author_id),
            self.store.find_projected(author_id),
        )
        return lookup, books

    def _confirmation(
        self,
        lookup: Found[Author] | MissingType,
        books: list[BookSummary] | list[Book],
    ) -> Render | Redirect:
        author = self._require(lookup, NotFoundPolicy.REDIRECT)
        if author is None:
            return Redirect(location=AUTHOR_LIST_URL)

        return Render(
            view=VIEW_AUTHOR_DELETE,
            data={
                "title": "Delete Author",
                "author": author,
                "author_books": books,
            },
        )

    @staticmethod
    def _require(
        lookup: Found[Author] | MissingType, policy: NotFoundPolicy
    ) -> Author | None:
        if isinstance(lookup, Found):
            return lookup.value
        if policy is NotFoundPolicy.RAISE:
            raise NotFoundError("Author not found")
        return None

    def _delete_target(
        self, author_id: int, submitted_author_id: int | str | None
    ) -> int:
        try:
            submitted = int(submitted_author_id)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            submitted = None

        if submitted == author_id:
            return author_id

        if self.strict_delete_id_check or submitted is None:
            logger.warning(
                f"Delete of author {author_id} submitted mismatching id {submitted_author_id!r}"
            )
            raise IdentityMismatchError(
                f"Submitted author id {submitted_author_id!r} does not match {author_id}"
            )
        return submitted

    def _record_listed(self, author: Author) -> None:
        try:
            self.recorder.record(
                "author_listed",
                name=getattr(author, "name", None),
                date_of_birth=getattr(author, "date_of_birth", None),
                date_of_death=getattr(author, "date_of_death", None),
            )
        except Exception as ex:
            # One bad record must not abort the listing
            logger.warning(f"Could not record listed author: {ex}")
