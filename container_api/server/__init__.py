"""Server package owning the HTTP listener and its lifecycle."""

from .lifecycle import GracefulServer, ServerStartupError, ServiceState, server_create, server_run

__all__ = ["GracefulServer", "ServerStartupError", "ServiceState", "server_create", "server_run"]
