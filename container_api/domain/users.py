"""Fixed user records served by the users endpoint."""

from typing import Final

from .models import UserRecord

DEFAULT_USER_RECORDS: Final[tuple[UserRecord, ...]] = (
    UserRecord(id=1, name="Alice", role="Developer"),
    UserRecord(id=2, name="Bob", role="Designer"),
    UserRecord(id=3, name="Charlie", role="Manager"),
)
