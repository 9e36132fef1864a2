"""Typed interfaces for runtime-layer responsibilities."""

from datetime import datetime
from typing import Protocol


class RuntimeInfoPort(Protocol):
    """Port definition for ambient process and host information.

    Implementations must compute values on each call so callers always see
    current state.
    """

    def runtime_now(self) -> datetime:
        """Return the current timezone-aware UTC time.

        Returns:
            datetime: Wall-clock time.
        """

    def runtime_uptime_seconds(self) -> float:
        """Return seconds elapsed since start.

        Returns:
            float: Non-negative, non-decreasing uptime.
        """

    def runtime_hostname(self) -> str:
        """Return the operating system host name.

        Returns:
            str: Host name.
        """

    def runtime_platform(self) -> str:
        """Return the operating system platform identifier.

        Returns:
            str: Platform such as `linux` or `darwin`.
        """

    def runtime_version(self) -> str:
        """Return the interpreter version string.

        Returns:
            str: Version such as `3.12.4`.
        """
