"""Typed interfaces for user directory responsibilities."""

from typing import Protocol

from container_api.domain import UserRecord


class UserDirectoryPort(Protocol):
    """Port definition for listing user records."""

    def users_list(self) -> tuple[UserRecord, ...]:
        """Return all user records in their stable order.

        Returns:
            tuple[UserRecord, ...]: Immutable ordered user records.
        """
