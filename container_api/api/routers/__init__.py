"""API router package for endpoint composition."""

from .foundation import api_build_service_manifest, api_create_foundation_router
from .health import HEALTH_PATH, api_create_health_router
from .info import INFO_PATH, api_create_info_router
from .users import USERS_PATH, api_create_users_router

__all__ = [
    "HEALTH_PATH",
    "INFO_PATH",
    "USERS_PATH",
    "api_build_service_manifest",
    "api_create_foundation_router",
    "api_create_health_router",
    "api_create_info_router",
    "api_create_users_router",
]
