"""Route registration helpers shared by endpoint routers."""

from typing import Final

ROUTE_METHODS: Final[list[str]] = ["GET", "HEAD"]


def api_route_variants(path: str) -> tuple[str, ...]:
    """Return the paths a route answers on, with and without a trailing slash.

    Args:
        path: Canonical route path without trailing slash.

    Returns:
        tuple[str, ...]: Canonical path first, then its trailing-slash form.

    Raises:
        ValueError: Raised when path does not start with `/`.
    """

    if not path.startswith("/"):
        raise ValueError("path must start with '/'")
    if path == "/":
        return (path,)
    return (path, f"{path}/")
