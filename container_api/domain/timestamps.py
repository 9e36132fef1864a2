"""Timestamp rendering helpers for wire payloads."""

from datetime import datetime, timezone


def domain_format_timestamp(moment: datetime) -> str:
    """Render a datetime as ISO-8601 UTC with millisecond precision.

    Args:
        moment: Timezone-aware datetime. Naive values are rejected.

    Returns:
        str: Timestamp such as `2026-10-19T13:01:02.123Z`.

    Raises:
        ValueError: Raised when moment is naive.
    """

    if moment.tzinfo is None:
        raise ValueError("moment must be timezone-aware")

    utc_moment = moment.astimezone(timezone.utc)
    return utc_moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
