"""Root endpoint router composition for the welcome manifest."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from container_api import __version__
from container_api.domain import ServiceManifest

from .health import HEALTH_PATH
from .info import INFO_PATH
from .paths import ROUTE_METHODS
from .users import USERS_PATH

WELCOME_MESSAGE = "Welcome to my containerized API!"


def api_build_service_manifest() -> ServiceManifest:
    """Build the welcome manifest from the registered route paths.

    Returns:
        ServiceManifest: Static manifest advertising health, users and info endpoints.
    """

    return ServiceManifest(
        message=WELCOME_MESSAGE,
        version=__version__,
        endpoints={"health": HEALTH_PATH, "users": USERS_PATH, "info": INFO_PATH},
    )


def api_create_foundation_router(manifest: ServiceManifest) -> APIRouter:
    """Create root router returning the welcome manifest.

    Args:
        manifest: Manifest rendered on every call.

    Returns:
        APIRouter: Router exposing `/` endpoint.

    Raises:
        ValueError: Raised when manifest is invalid.
    """

    if manifest is None:
        raise ValueError("manifest must not be None")

    router = APIRouter(tags=["foundation"])
    payload = manifest.to_payload()

    @router.api_route("/", methods=ROUTE_METHODS)
    def foundation_index() -> JSONResponse:
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
