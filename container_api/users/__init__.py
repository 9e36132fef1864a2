"""User directory package for the read-only user list."""

from .interfaces import UserDirectoryPort
from .static_directory import StaticUserDirectory

__all__ = ["StaticUserDirectory", "UserDirectoryPort"]
