"""Runtime info provider backed by the live process and host."""

from __future__ import annotations

import platform
import socket
import sys
import time
from datetime import datetime, timezone
from typing import Callable

from .interfaces import RuntimeInfoPort


class HostRuntimeInfoProvider(RuntimeInfoPort):
    """Read process uptime and host identity from the operating environment.

    Uptime uses a monotonic clock so wall-clock adjustments never make it
    decrease. Host identity is read on every call and never cached.
    """

    def __init__(
        self,
        monotonic_clock: Callable[[], float] = time.monotonic,
        wall_clock: Callable[[], datetime] | None = None,
    ):
        """Initialize provider and record the monotonic start instant.

        Args:
            monotonic_clock: Monotonic seconds source used for uptime.
            wall_clock: Optional UTC datetime source; defaults to `datetime.now(timezone.utc)`.

        Raises:
            ValueError: Raised when monotonic_clock is None.
        """

        if monotonic_clock is None:
            raise ValueError("monotonic_clock must not be None")
        self._monotonic_clock = monotonic_clock
        self._wall_clock = wall_clock or (lambda: datetime.now(timezone.utc))
        self._started_monotonic = self._monotonic_clock()

    def runtime_now(self) -> datetime:
        return self._wall_clock()

    def runtime_uptime_seconds(self) -> float:
        return max(0.0, self._monotonic_clock() - self._started_monotonic)

    def runtime_hostname(self) -> str:
        return socket.gethostname() or platform.node() or "localhost"

    def runtime_platform(self) -> str:
        return sys.platform

    def runtime_version(self) -> str:
        return platform.python_version()
