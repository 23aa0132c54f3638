"""
Author endpoints.

These endpoints are thin: they parse the request, call the
AuthorController and hand its instruction to the presentation adapter.
Failures raised by the controller reach the shared exception handlers.

Example:
    GET  /authors
    POST /authors/create  (form: first_name, family_name, date_of_birth, date_of_death)
    POST /authors/3/delete  (form: authorid=3)
"""

from typing import Annotated

from fastapi import APIRouter, Form, Response

from catalog.api.http.presentation import to_response
from catalog.dependencies import AuthorControllerDep

router = APIRouter(prefix="/authors", tags=["authors"])

OptionalFormField = Annotated[str | None, Form()]


def _author_form(
    first_name: str | None,
    family_name: str | None,
    date_of_birth: str | None,
    date_of_death: str | None,
) -> dict[str, str | None]:
    return {
        "first_name": first_name,
        "family_name": family_name,
        "date_of_birth": date_of_birth,
        "date_of_death": date_of_death,
    }


@router.get("", summary="List authors")
async def author_list(controller: AuthorControllerDep) -> Response:
    """Display list of all authors, sorted by family name."""
    return to_response(await controller.list_authors())


@router.get("/create", summary="Author create form")
async def author_create_get(controller: AuthorControllerDep) -> Response:
    return to_response(controller.render_create_form())


@router.post("/create", summary="Create an author")
async def author_create_post(
    controller: AuthorControllerDep,
    first_name: OptionalFormField = None,
    family_name: OptionalFormField = None,
    date_of_birth: OptionalFormField = None,
    date_of_death: OptionalFormField = None,
) -> Response:
    """
    Handle author create on POST.

    Redirects to the new author on success; otherwise renders the form
    again with the sanitized input and the field errors.
    """
    form = _author_form(first_name, family_name, date_of_birth, date_of_death)
    return to_response(await controller.create_author(form))


@router.get("/{author_id}", summary="Author detail")
async def author_detail(
    author_id: int, controller: AuthorControllerDep
) -> Response:
    """Display detail page for a specific author and their books."""
    return to_response(await controller.get_author_detail(author_id))


@router.get("/{author_id}/delete", summary="Author delete confirmation")
async def author_delete_get(
    author_id: int, controller: AuthorControllerDep
) -> Response:
    return to_response(await controller.render_delete_confirmation(author_id))


@router.post("/{author_id}/delete", summary="Delete an author")
async def author_delete_post(
    author_id: int,
    controller: AuthorControllerDep,
    authorid: OptionalFormField = None,
) -> Response:
    """
    Handle author delete on POST.

    Authors still referenced by books are not deleted; the confirmation
    page is shown again instead.
    """
    return to_response(await controller.delete_author(author_id, authorid))


@router.get("/{author_id}/update", summary="Author update form")
async def author_update_get(
    author_id: int, controller: AuthorControllerDep
) -> Response:
    return to_response(await controller.render_update_form(author_id))


@router.post("/{author_id}/update", summary="Update an author")
async def author_update_post(
    author_id: int,
    controller: AuthorControllerDep,
    first_name: OptionalFormField = None,
    family_name: OptionalFormField = None,
    date_of_birth: OptionalFormField = None,
    date_of_death: OptionalFormField = None,
) -> Response:
    """Handle author update on POST; the path id is the author's identity."""
    form = _author_form(first_name, family_name, date_of_birth, date_of_death)
    return to_response(await controller.update_author(author_id, form))
