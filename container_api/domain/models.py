"""Typed domain models shared across runtime layers.

Every contract here is immutable. Values are either compiled-in constants or
computed per request from the operating environment.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class UserRecord:
    """One entry of the fixed user list.

    Attributes:
        id: Stable numeric identifier.
        name: Display name.
        role: Job role label.
    """

    id: int
    name: str
    role: str

    def to_payload(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "role": self.role}


@dataclass(frozen=True)
class HealthStatus:
    """Liveness contract used by load balancer health checks.

    Attributes:
        status: Overall status text for service health.
        timestamp: ISO-8601 UTC time the check was answered.
        uptime: Seconds since the service process started.
    """

    status: str
    timestamp: str
    uptime: float

    def to_payload(self) -> dict[str, Any]:
        return {"status": self.status, "timestamp": self.timestamp, "uptime": self.uptime}


@dataclass(frozen=True)
class ServiceInfo:
    """Runtime identity of the serving host.

    Attributes:
        environment: Configured runtime environment label.
        hostname: Operating system host name.
        platform: Operating system platform identifier.
        runtime_version: Interpreter version string.
    """

    environment: str
    hostname: str
    platform: str
    runtime_version: str

    def to_payload(self) -> dict[str, Any]:
        return {
            "environment": self.environment,
            "hostname": self.hostname,
            "platform": self.platform,
            "runtimeVersion": self.runtime_version,
        }


@dataclass(frozen=True)
class ServiceManifest:
    """Static welcome payload advertising the available endpoints.

    Attributes:
        message: Greeting text.
        version: Public API version.
        endpoints: Endpoint name to path mapping.
    """

    message: str
    version: str
    endpoints: Mapping[str, str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "endpoints", MappingProxyType(dict(self.endpoints)))

    def to_payload(self) -> dict[str, Any]:
        return {"message": self.message, "version": self.version, "endpoints": dict(self.endpoints)}
