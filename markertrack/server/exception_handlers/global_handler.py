"""
Exception Handlers for the FastAPI Application.

Domain errors (``MarkerTrackError`` subclasses) become JSON responses with
the status code the error carries. Any other unhandled exception is logged
with its request context and answered with a 500 that includes an error ID
clients can quote when reporting the problem.
"""

import traceback

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from markertrack.core.errors import MarkerTrackError
from markertrack.core.logging_config import get_logger

logger = get_logger(__name__)


async def domain_exception_handler(request: Request, exc: MarkerTrackError) -> JSONResponse:
    """
    Translate a domain error into its HTTP response.

    Args:
        request: The HTTP request that caused the exception
        exc: The domain error that was raised

    Returns:
        JSONResponse with ``{"detail": message}`` and the error's status code
    """
    logger.warning(
        f"{type(exc).__name__} in {request.method} {request.url.path}: {exc.message}",
        extra={
            'method': request.method,
            'path': request.url.path,
            'error_type': type(exc).__name__,
            'status_code': exc.status_code,
        },
    )
    return JSONResponse(status_code=exc.status_code, content={'detail': exc.message})


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler to log detailed error information.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with error details and error ID
    """
    error_id = id(exc)

    logger.error(
        f'Unhandled exception [{error_id}] in {request.method} {request.url.path}: {str(exc)}',
        exc_info=True,
        extra={
            'error_id': error_id,
            'method': request.method,
            'path': request.url.path,
            'query_params': dict(request.query_params),
            'client': request.client.host if request.client else 'unknown',
            'error_type': type(exc).__name__,
            'traceback': traceback.format_exc(),
        }
    )

    return JSONResponse(
        status_code=500,
        content={
            'detail': 'Internal server error',
            'error_id': error_id,
            'error_type': type(exc).__name__,
        }
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(MarkerTrackError, domain_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
