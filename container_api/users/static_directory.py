"""In-memory user directory over a fixed record sequence."""

from collections.abc import Iterable

from container_api.domain import DEFAULT_USER_RECORDS, UserRecord

from .interfaces import UserDirectoryPort


class StaticUserDirectory(UserDirectoryPort):
    """User directory serving a fixed, never-mutated sequence of records."""

    def __init__(self, records: Iterable[UserRecord] = DEFAULT_USER_RECORDS):
        """Initialize directory with an ordered record sequence.

        Args:
            records: User records in presentation order.

        Raises:
            ValueError: Raised when record ids are not unique.
        """

        frozen_records = tuple(records)
        record_ids = [record.id for record in frozen_records]
        if len(set(record_ids)) != len(record_ids):
            raise ValueError("user record ids must be unique")
        self._records = frozen_records

    def users_list(self) -> tuple[UserRecord, ...]:
        return self._records
