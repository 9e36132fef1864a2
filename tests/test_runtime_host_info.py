"""Tests for host-backed runtime info provider and domain helpers."""

import platform
import sys
from datetime import datetime, timedelta, timezone

import pytest

from container_api.domain import DEFAULT_USER_RECORDS, ServiceManifest, UserRecord, domain_format_timestamp
from container_api.runtime import HostRuntimeInfoProvider
from container_api.users import StaticUserDirectory


class _ManualClock:
    """Monotonic clock double advanced explicitly by tests."""

    def __init__(self, start: float = 100.0) -> None:
        self.value = start

    def __call__(self) -> float:
        return self.value


def test_runtime_uptime_tracks_monotonic_clock() -> None:
    """Measure uptime from the instant the provider was created.

    Returns:
        None: Assertions validate uptime arithmetic.

    Raises:
        AssertionError: Raised when uptime is not relative to start.
    """

    clock = _ManualClock()
    provider = HostRuntimeInfoProvider(monotonic_clock=clock)

    assert provider.runtime_uptime_seconds() == 0.0
    clock.value += 12.25
    assert provider.runtime_uptime_seconds() == 12.25


def test_runtime_uptime_never_negative() -> None:
    """Clamp uptime at zero if the clock source misbehaves.

    Returns:
        None: Assertions validate clamping.

    Raises:
        AssertionError: Raised when uptime goes negative.
    """

    clock = _ManualClock()
    provider = HostRuntimeInfoProvider(monotonic_clock=clock)
    clock.value -= 5

    assert provider.runtime_uptime_seconds() == 0.0


def test_runtime_wall_clock_is_injectable() -> None:
    """Use the injected wall clock for the current time.

    Returns:
        None: Assertions validate clock injection.

    Raises:
        AssertionError: Raised when the injected clock is ignored.
    """

    fixed_moment = datetime(2026, 10, 19, 8, 30, tzinfo=timezone.utc)
    provider = HostRuntimeInfoProvider(wall_clock=lambda: fixed_moment)

    assert provider.runtime_now() == fixed_moment


def test_runtime_host_identity_matches_interpreter() -> None:
    """Report host platform and interpreter version from the live process.

    Returns:
        None: Assertions validate host identity.

    Raises:
        AssertionError: Raised when identity differs from the interpreter.
    """

    provider = HostRuntimeInfoProvider()

    assert provider.runtime_hostname()
    assert provider.runtime_platform() == sys.platform
    assert provider.runtime_version() == platform.python_version()


def test_domain_format_timestamp_renders_utc_milliseconds() -> None:
    """Render aware datetimes as millisecond UTC timestamps with a `Z` suffix.

    Returns:
        None: Assertions validate rendering.

    Raises:
        AssertionError: Raised when rendering differs.
    """

    offset_moment = datetime(2026, 10, 19, 15, 1, 2, 123456, tzinfo=timezone(timedelta(hours=2)))

    assert domain_format_timestamp(offset_moment) == "2026-10-19T13:01:02.123Z"


def test_domain_format_timestamp_rejects_naive_datetime() -> None:
    """Reject naive datetimes.

    Returns:
        None: Assertions validate input checks.

    Raises:
        AssertionError: Raised when naive input is accepted.
    """

    with pytest.raises(ValueError, match="timezone-aware"):
        domain_format_timestamp(datetime(2026, 10, 19))


def test_domain_default_users_are_fixed() -> None:
    """Expose the three fixed user records in order.

    Returns:
        None: Assertions validate constants.

    Raises:
        AssertionError: Raised when the constant list changes.
    """

    assert DEFAULT_USER_RECORDS == (
        UserRecord(id=1, name="Alice", role="Developer"),
        UserRecord(id=2, name="Bob", role="Designer"),
        UserRecord(id=3, name="Charlie", role="Manager"),
    )
    assert StaticUserDirectory().users_list() == DEFAULT_USER_RECORDS


def test_users_directory_rejects_duplicate_ids() -> None:
    """Refuse record sequences with repeated ids.

    Returns:
        None: Assertions validate input checks.

    Raises:
        AssertionError: Raised when duplicates are accepted.
    """

    with pytest.raises(ValueError, match="unique"):
        StaticUserDirectory(records=[UserRecord(1, "A", "x"), UserRecord(1, "B", "y")])


def test_domain_manifest_endpoints_are_read_only() -> None:
    """Freeze the endpoint mapping of a manifest.

    Returns:
        None: Assertions validate immutability.

    Raises:
        AssertionError: Raised when the mapping can be mutated.
    """

    source_endpoints = {"health": "/health"}
    manifest = ServiceManifest(message="hi", version="1.0.0", endpoints=source_endpoints)
    source_endpoints["extra"] = "/extra"

    assert dict(manifest.endpoints) == {"health": "/health"}
    with pytest.raises(TypeError):
        manifest.endpoints["health"] = "/changed"  # type: ignore[index]
