"""
Base Repository Interface.
Defines the standard contract for data access operations.

Implementations are total: storage failures come back as None, an empty
list or False, never as exceptions.
"""

from typing import ContextManager, Optional, Protocol, TypeVar

from billtracker.core.transaction import TransactionScope

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for upsert-by-id persistence of one entity type."""

    def save(self, entity: T) -> Optional[T]:
        """Insert when ``entity.id == 0`` (writing the new id back), else overwrite the row."""
        ...

    def find_by_id(self, id: int) -> Optional[T]:
        """Get a single entity by ID; ids <= 0 never reach storage."""
        ...

    def atomic(self) -> ContextManager[TransactionScope]:
        """Group the writes of every repository sharing this session into one transaction."""
        ...
