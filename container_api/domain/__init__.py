"""Domain models used across application layer boundaries."""

from .models import HealthStatus, ServiceInfo, ServiceManifest, UserRecord
from .timestamps import domain_format_timestamp
from .users import DEFAULT_USER_RECORDS

__all__ = [
    "DEFAULT_USER_RECORDS",
    "HealthStatus",
    "ServiceInfo",
    "ServiceManifest",
    "UserRecord",
    "domain_format_timestamp",
]
