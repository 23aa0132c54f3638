"""
Instructions handed from the controller to the presentation adapter.

The controller never builds HTTP responses itself. It returns either a
``Render`` (view name + data bag) or a ``Redirect``; failures are raised as
``AppException`` and become an ``ErrorView`` in the shared error handler.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Render(BaseModel):  # type: ignore[misc]
    """Render ``view`` with ``data``; ``data`` always carries a title."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    view: str
    data: dict[str, Any] = Field(default_factory=dict)

    @property
    def title(self) -> str:
        return self.data.get("title", "")


class Redirect(BaseModel):  # type: ignore[misc]
    """Send the client to ``location``."""

    location: str


class ErrorDetail(BaseModel):  # type: ignore[misc]
    title: str
    message: str
    status: int = 500


class ErrorView(BaseModel):  # type: ignore[misc]
    """Generic error page rendered for propagated failures."""

    view: str = "error"
    data: ErrorDetail
