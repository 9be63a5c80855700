"""
SQLAlchemy Implementation of Event Repository.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from billtracker.domain.models.event import EventModel
from billtracker.domain.repositories.event_repository import EventRepository
from billtracker.domain.schemas.event import Event, EventStatus
from billtracker.infrastructure.repositories.base_repository import SQLAlchemyRepository, storage_guard


class SQLAlchemyEventRepository(SQLAlchemyRepository[EventModel, Event], EventRepository):
    """Event repository implementation using SQLAlchemy."""

    def __init__(self, db: Session):
        super().__init__(db, EventModel, Event)

    @storage_guard()
    def find_by_name(self, name: str) -> Optional[Event]:
        if not name:
            return None
        row = self.db.query(EventModel).filter(EventModel.name == name).first()
        return self._to_entity(row) if row is not None else None

    @storage_guard(bool)
    def set_status_by_id(self, id: int, status: EventStatus) -> bool:
        """Existence check and write in one UPDATE; the row count is the answer."""
        if id <= 0:
            return False
        updated = (
            self.db.query(EventModel)
            .filter(EventModel.id == id)
            .update({EventModel.status: int(status)}, synchronize_session="evaluate")
        )
        if updated != 1:
            return False
        self._commit()
        return True

    @storage_guard(list)
    def list_all(self) -> List[Event]:
        rows = self.db.query(EventModel).order_by(EventModel.id.asc()).all()
        return [self._to_entity(row) for row in rows]
