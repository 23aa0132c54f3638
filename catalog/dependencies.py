"""
Dependency injection configuration for FastAPI.

Using FastAPI's Depends() system with @lru_cache provides singleton-like
behavior while maintaining testability: tests replace any of these through
``app.dependency_overrides``.

Example:
    ```python
    from catalog.dependencies import AuthorControllerDep

    @router.get("/authors")
    async def author_list(controller: AuthorControllerDep) -> Response:
        return to_response(await controller.list_authors())
    ```
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from catalog.controllers.author_controller import AuthorController
from catalog.observability import LoggingEventRecorder
from catalog.protocols import EventRecorder, RecordStore
from catalog.storage.db import async_session
from catalog.storage.store import CatalogStore


@lru_cache
def get_record_store() -> RecordStore:
    """
    Get cached record store bound to the application session factory.

    Returns:
        Cached CatalogStore instance.
    """
    return CatalogStore(async_session)


@lru_cache
def get_event_recorder() -> EventRecorder:
    return LoggingEventRecorder()


def get_author_controller(
    store: Annotated[RecordStore, Depends(get_record_store)],
    recorder: Annotated[EventRecorder, Depends(get_event_recorder)],
) -> AuthorController:
    return AuthorController(store, recorder)


AuthorControllerDep = Annotated[AuthorController, Depends(get_author_controller)]
