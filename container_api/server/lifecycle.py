"""Uvicorn server wrapper with explicit lifecycle state and graceful shutdown.

The wrapper is the single owner of the listener handle. Signal handling is
delegated to uvicorn, which stops accepting connections, waits for in-flight
requests up to the configured grace period, then returns from `run`.
"""

from __future__ import annotations

import logging
import signal
import socket
from enum import Enum
from types import FrameType

import uvicorn
from fastapi import FastAPI

logger = logging.getLogger(__name__)


class ServerStartupError(RuntimeError):
    """Raised when the server stopped without ever reaching the running state."""


class ServiceState(str, Enum):
    """Lifecycle states of the HTTP service."""

    STARTING = "starting"
    RUNNING = "running"
    SHUTTING_DOWN = "shutting_down"
    STOPPED = "stopped"


def _signal_name(sig: int) -> str:
    try:
        return signal.Signals(sig).name
    except ValueError:
        return str(sig)


class GracefulServer(uvicorn.Server):
    """Uvicorn server that tracks lifecycle state and logs transitions."""

    def __init__(self, config: uvicorn.Config):
        super().__init__(config)
        self.lifecycle_state = ServiceState.STARTING

    def _transition(self, target_state: ServiceState) -> None:
        if self.lifecycle_state is target_state:
            return
        logger.debug("Service state %s -> %s", self.lifecycle_state.value, target_state.value)
        self.lifecycle_state = target_state

    def bound_port(self) -> int:
        """Return the port the listener is bound to.

        Returns:
            int: Actual bound port, or the configured port before binding.
        """

        for server in getattr(self, "servers", None) or []:
            for bound_socket in server.sockets or ():
                if bound_socket.family in (socket.AF_INET, socket.AF_INET6):
                    return int(bound_socket.getsockname()[1])
        return int(self.config.port)

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        self._transition(ServiceState.STARTING)
        await super().startup(sockets=sockets)
        if not self.started:
            return
        self._transition(ServiceState.RUNNING)
        port = self.bound_port()
        logger.info("Server running on port %d", port)
        logger.info("Health check available at http://localhost:%d/health", port)

    def handle_exit(self, sig: int, frame: FrameType | None) -> None:
        if not self.should_exit:
            logger.info("%s signal received: closing HTTP server", _signal_name(sig))
            self._transition(ServiceState.SHUTTING_DOWN)
        super().handle_exit(sig, frame)

    async def shutdown(self, sockets: list[socket.socket] | None = None) -> None:
        self._transition(ServiceState.SHUTTING_DOWN)
        await super().shutdown(sockets=sockets)
        self._transition(ServiceState.STOPPED)
        logger.info("HTTP server closed")


def server_create(
    application: FastAPI,
    host: str,
    port: int,
    log_level: str = "info",
    shutdown_grace_seconds: float | None = None,
) -> GracefulServer:
    """Create the server that will own the listener for an application.

    Args:
        application: ASGI application to serve.
        host: Interface to bind.
        port: TCP port to bind; `0` lets the OS choose.
        log_level: Uvicorn log level name.
        shutdown_grace_seconds: Upper bound for in-flight requests on shutdown.

    Returns:
        GracefulServer: Unstarted server holding the listener configuration.

    Raises:
        ValueError: Raised when port is outside `0..65535`.
    """

    if port < 0 or port > 65535:
        raise ValueError("port must be within 0..65535")

    config = uvicorn.Config(
        application,
        host=host,
        port=port,
        log_level=log_level,
        log_config=None,
        timeout_graceful_shutdown=shutdown_grace_seconds,
    )
    return GracefulServer(config)


def server_run(server: GracefulServer) -> None:
    """Run the server until it is asked to exit.

    Args:
        server: Server created by `server_create`.

    Raises:
        ServerStartupError: Raised when the server never reached the running state.
        SystemExit: Raised by uvicorn when the listener cannot bind.
    """

    server.run()
    if not server.started:
        raise ServerStartupError("HTTP server failed to start")
