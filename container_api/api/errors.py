"""Uniform JSON error envelope and framework exception handlers."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def api_error_response(
    status_code: int,
    message: str,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    """Build the error envelope shared by every non-2xx response.

    Args:
        status_code: HTTP status code.
        message: Short human-readable reason.
        headers: Optional extra response headers.

    Returns:
        JSONResponse: `{"status": "error", "message": ...}` response.
    """

    payload = {"status": "error", "message": message}
    return JSONResponse(content=payload, status_code=status_code, headers=dict(headers) if headers else None)


async def api_http_error_handler(_request: Request, error: StarletteHTTPException) -> JSONResponse:
    """Render routing errors and explicit HTTP errors as the envelope.

    Routes match on method and path together, so a known path requested with
    an unregistered method is reported as not found.
    """

    if error.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return api_error_response(status_code=status.HTTP_404_NOT_FOUND, message="Not Found")
    return api_error_response(status_code=error.status_code, message=str(error.detail), headers=error.headers)


async def api_unhandled_error_handler(request: Request, error: Exception) -> JSONResponse:
    """Log an unexpected handler failure and return a 500 envelope."""

    logger.exception("Unhandled error while serving %s %s", request.method, request.url.path, exc_info=error)
    return api_error_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message="internal server error",
    )
