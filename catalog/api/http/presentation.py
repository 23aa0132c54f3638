"""
Presentation adapter: controller instructions to HTTP responses.

``Render`` becomes a JSON document ``{"view": ..., "data": ...}`` that a
template layer or client can draw; ``Redirect`` becomes a 302.
"""

from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, RedirectResponse, Response

from catalog.schemas.presentation import Redirect, Render


def present(value: Any) -> Any:
    """
    Convert view data into JSON-compatible values.

    Objects exposing ``to_view()`` (authors, drafts, books, field errors)
    contribute their computed fields as well as the stored ones.
    """
    if hasattr(value, "to_view"):
        return value.to_view()
    if isinstance(value, dict):
        return {key: present(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [present(item) for item in value]
    return jsonable_encoder(value)


def to_response(instruction: Render | Redirect) -> Response:
    """
    Turn a controller instruction into a response.

    Args:
        instruction: What the controller decided.

    Returns:
        JSONResponse for renders, RedirectResponse for redirects.
    """
    if isinstance(instruction, Redirect):
        return RedirectResponse(
            url=instruction.location, status_code=status.HTTP_302_FOUND
        )

    return JSONResponse(
        content={"view": instruction.view, "data": present(instruction.data)},
        status_code=status.HTTP_200_OK,
    )
