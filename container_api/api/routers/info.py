"""Info endpoint router composition for runtime and host identity."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from container_api.config import AppSettings
from container_api.domain import ServiceInfo
from container_api.runtime import RuntimeInfoPort

from .paths import ROUTE_METHODS, api_route_variants

INFO_PATH = "/api/info"


def api_create_info_router(settings: AppSettings, runtime_info: RuntimeInfoPort) -> APIRouter:
    """Create router describing the serving environment and host.

    Args:
        settings: Runtime settings carrying the configured environment label.
        runtime_info: Runtime info provider for host identity.

    Returns:
        APIRouter: Router exposing `/api/info` endpoint.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if runtime_info is None:
        raise ValueError("runtime_info must not be None")

    router = APIRouter(tags=["info"])

    def api_service_info() -> JSONResponse:
        """Return environment label and host identity read at request time.

        Returns:
            JSONResponse: Service info payload.

        Raises:
            OSError: Raised when host identity cannot be read.
        """

        service_info = ServiceInfo(
            environment=settings.environment_name,
            hostname=runtime_info.runtime_hostname(),
            platform=runtime_info.runtime_platform(),
            runtime_version=runtime_info.runtime_version(),
        )
        return JSONResponse(content=service_info.to_payload(), status_code=status.HTTP_200_OK)

    for route_path in api_route_variants(INFO_PATH):
        router.add_api_route(route_path, api_service_info, methods=ROUTE_METHODS)

    return router
