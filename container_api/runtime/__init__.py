"""Runtime layer package for process and host identity boundaries."""

from .host_info import HostRuntimeInfoProvider
from .interfaces import RuntimeInfoPort

__all__ = ["HostRuntimeInfoProvider", "RuntimeInfoPort"]
