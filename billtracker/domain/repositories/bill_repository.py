"""
Bill Repository Interface.
Defines specific data access operations for Bills.
"""

from datetime import datetime
from typing import List, Optional

from billtracker.domain.repositories.base import BaseRepository
from billtracker.domain.schemas.bill import Bill


class BillRepository(BaseRepository[Bill]):
    """Interface for Bill-specific operations.

    Every read embeds the referenced Event; ``find_by_id`` also embeds the
    live annotation.
    """

    def query_by_event(self, owner_id: int, event_id: int) -> List[Bill]:
        """Get an owner's bills in one event."""
        ...

    def query_by_event_name(self, name: str) -> List[Bill]:
        """Get all bills in the event with this name (admin)."""
        ...

    def query_by_time(self, start: datetime, end: datetime, owner_id: Optional[int] = None) -> List[Bill]:
        """Get bills created in [start, end], for one owner or everyone."""
        ...

    def query_by_time_in_order(self, start: datetime, end: datetime) -> List[Bill]:
        """Get bills in [start, end] in ascending time; equal timestamps keep event id order."""
        ...

    def query_by_time_and_event_in_order(self, start: datetime, end: datetime) -> List[Bill]:
        """Get bills in [start, end] sorted by (created_at, event_id)."""
        ...

    def query_by_phone(self, phone: str) -> List[Bill]:
        """Get the bills of the user registered under this phone (admin)."""
        ...

    def remove(self, id: int) -> bool:
        """Delete a bill and its annotations; a missing row is not an error.

        False only when storage refused the delete.
        """
        ...
