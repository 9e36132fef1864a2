"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from container_api.api import create_api_application
from container_api.config import AppSettings, config_load_settings
from container_api.runtime import HostRuntimeInfoProvider
from container_api.server import GracefulServer, server_create
from container_api.users import StaticUserDirectory


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application from validated settings.

    Args:
        settings: Optional preloaded settings; loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings if settings is not None else config_load_settings()
    return create_api_application(
        settings=resolved_settings,
        runtime_info=HostRuntimeInfoProvider(),
        user_directory=StaticUserDirectory(),
    )


def bootstrap_create_server(settings: AppSettings) -> GracefulServer:
    """Build the application and the server that owns its listener.

    Args:
        settings: Validated runtime settings.

    Returns:
        GracefulServer: Unstarted server bound to the configured host and port.

    Raises:
        ValueError: Raised when settings are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    application = bootstrap_create_application(settings=settings)
    return server_create(
        application,
        host=settings.application_host,
        port=settings.application_port,
        log_level=settings.log_level,
        shutdown_grace_seconds=settings.shutdown_grace_seconds,
    )
