"""Health endpoint router composition for load balancer liveness checks."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from container_api.domain import HealthStatus, domain_format_timestamp
from container_api.runtime import RuntimeInfoPort

from .paths import ROUTE_METHODS, api_route_variants

HEALTH_PATH = "/health"


def api_create_health_router(runtime_info: RuntimeInfoPort) -> APIRouter:
    """Create health-check router reporting liveness and process uptime.

    Args:
        runtime_info: Runtime info provider for clock and uptime readings.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when runtime_info is invalid.
    """

    if runtime_info is None:
        raise ValueError("runtime_info must not be None")

    router = APIRouter(tags=["health"])

    def api_health_status() -> JSONResponse:
        """Return liveness state with a fresh timestamp and uptime.

        Returns:
            JSONResponse: Health payload computed at request time.
        """

        health = HealthStatus(
            status="healthy",
            timestamp=domain_format_timestamp(runtime_info.runtime_now()),
            uptime=runtime_info.runtime_uptime_seconds(),
        )
        return JSONResponse(content=health.to_payload(), status_code=status.HTTP_200_OK)

    for route_path in api_route_variants(HEALTH_PATH):
        router.add_api_route(route_path, api_health_status, methods=ROUTE_METHODS)

    return router
