"""
Shared error handling for HTTP endpoints.

Failures the controller does not handle locally (missing authors on
direct-link views, id mismatches, store outages) propagate here and are
rendered as the generic error view with the exception's status. Anything
that is not an ``AppException`` is rendered as a 500.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from catalog.constants import VIEW_ERROR
from catalog.exceptions import AppException
from catalog.logging import logger
from catalog.schemas.presentation import ErrorDetail, ErrorView


def error_view(message: str, status: int = 500) -> ErrorView:
    """
    Build the generic error view.

    Args:
        message: Human-readable error description.
        status: HTTP status to report, 500 unless the error says otherwise.

    Returns:
        ErrorView ready to be serialized.
    """
    return ErrorView(
        view=VIEW_ERROR,
        data=ErrorDetail(title="Error", message=message, status=status),
    )


async def app_exception_handler(
    request: Request, ex: AppException
) -> JSONResponse:
    log = logger.error if ex.http_status >= 500 else logger.warning
    log(
        f"AppException on {request.method} {request.url.path}: {ex.message}",
        extra={"exception_type": type(ex).__name__},
    )
    view = error_view(ex.message, ex.http_status)
    return JSONResponse(status_code=ex.http_status, content=view.model_dump())


async def unhandled_exception_handler(
    request: Request, ex: Exception
) -> JSONResponse:
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {ex}",
        exc_info=ex,
        extra={"exception_type": type(ex).__name__},
    )
    view = error_view("Internal server error", 500)
    return JSONResponse(status_code=500, content=view.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    """Install the generic error handlers on ``app``."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
