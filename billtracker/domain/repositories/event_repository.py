"""
Event Repository Interface.
"""

from typing import List, Optional

from billtracker.domain.repositories.base import BaseRepository
from billtracker.domain.schemas.event import Event, EventStatus


class EventRepository(BaseRepository[Event]):
    """Interface for Event-specific operations."""

    def find_by_name(self, name: str) -> Optional[Event]:
        """Get the event with this exact name."""
        ...

    def set_status_by_id(self, id: int, status: EventStatus) -> bool:
        """Update the status of an existing event; False if the row is gone."""
        ...

    def list_all(self) -> List[Event]:
        """Get every event, oldest id first."""
        ...
