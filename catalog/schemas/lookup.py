"""
Result types for single-record lookups.

A store lookup returns either ``Found(record)`` or the ``Missing`` marker;
callers decide what a missing record means through ``NotFoundPolicy``
instead of catching exceptions.

Example:
    ```python
    lookup = await store.find_by_id(author_id)
    if isinstance(lookup, Found):
        author = lookup.value
    ```
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final, Generic, TypeVar, final

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Found(Generic[T]):
    """A lookup that matched a record."""

    value: T


@final
class MissingType:
    """Marker type for a lookup that matched nothing."""

    _instance: "MissingType | None" = None

    def __new__(cls) -> "MissingType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Missing"


Missing: Final = MissingType()


class NotFoundPolicy(str, Enum):
    """What an operation does when its primary record is missing."""

    RAISE = "raise"  # NotFoundError, rendered as a 404 error page
    REDIRECT = "redirect"  # quiet redirect to the author list
