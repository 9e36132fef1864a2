"""FastAPI application factory for the container info service.

This module defines API application composition: routers, request body
middleware and the JSON error envelope handlers.
"""

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from container_api import __version__
from container_api.config import AppSettings
from container_api.runtime import RuntimeInfoPort
from container_api.users import UserDirectoryPort

from .errors import api_http_error_handler, api_unhandled_error_handler
from .middleware import JsonBodyMiddleware
from .routers import (
    api_build_service_manifest,
    api_create_foundation_router,
    api_create_health_router,
    api_create_info_router,
    api_create_users_router,
)


def create_api_application(
    settings: AppSettings,
    runtime_info: RuntimeInfoPort,
    user_directory: UserDirectoryPort,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings assembled at startup.
        runtime_info: Runtime info provider used by health and info endpoints.
        user_directory: User directory used by the users endpoint.

    Returns:
        FastAPI: Framework application instance with all routes registered.

    Raises:
        ValueError: Raised when a dependency is invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    application = FastAPI(
        title="Container Info API",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    application.add_middleware(JsonBodyMiddleware, body_limit_bytes=settings.request_body_limit_bytes)

    application.add_exception_handler(StarletteHTTPException, api_http_error_handler)
    application.add_exception_handler(Exception, api_unhandled_error_handler)

    application.include_router(api_create_foundation_router(manifest=api_build_service_manifest()))
    application.include_router(api_create_health_router(runtime_info=runtime_info))
    application.include_router(api_create_users_router(user_directory=user_directory))
    application.include_router(api_create_info_router(settings=settings, runtime_info=runtime_info))

    return application
