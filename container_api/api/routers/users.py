"""Users endpoint router composition for the fixed user list."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from container_api.users import UserDirectoryPort

from .paths import ROUTE_METHODS, api_route_variants

USERS_PATH = "/api/users"


def api_create_users_router(user_directory: UserDirectoryPort) -> APIRouter:
    """Create router listing user records in directory order.

    Args:
        user_directory: Directory providing the ordered user records.

    Returns:
        APIRouter: Router exposing `/api/users` endpoint.

    Raises:
        ValueError: Raised when user_directory is invalid.
    """

    if user_directory is None:
        raise ValueError("user_directory must not be None")

    router = APIRouter(tags=["users"])

    def api_users_list() -> JSONResponse:
        payload = [record.to_payload() for record in user_directory.users_list()]
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    for route_path in api_route_variants(USERS_PATH):
        router.add_api_route(route_path, api_users_list, methods=ROUTE_METHODS)

    return router
