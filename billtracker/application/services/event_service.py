"""Event service: bill categories and their availability."""

from typing import List, Optional

import structlog

from billtracker.core.clock import local_now
from billtracker.domain.repositories.event_repository import EventRepository
from billtracker.domain.schemas.event import Event, EventStatus

logger = structlog.get_logger(__name__)


class EventService:
    def __init__(self, event_repo: EventRepository):
        self.event_repo = event_repo

    def query_by_name(self, name: str) -> Optional[Event]:
        if not name:
            return None
        return self.event_repo.find_by_name(name)

    def query_by_id(self, event_id: int) -> Optional[Event]:
        if event_id <= 0:
            return None
        return self.event_repo.find_by_id(event_id)

    def list_events(self) -> List[Event]:
        return self.event_repo.list_all()

    def is_available(self, event_id: int) -> bool:
        event = self.query_by_id(event_id)
        return event is not None and event.status == EventStatus.AVAILABLE

    def create_event(self, event: Event) -> Optional[Event]:
        """Persist a new event; a duplicate name is a conflict, not an upsert.

        The new id is written back into ``event``.
        """
        if not event.name:
            logger.debug("Event rejected", reason="empty name")
            return None
        if self.event_repo.find_by_name(event.name) is not None:
            logger.info("Event rejected", reason="duplicate name", name=event.name)
            return None

        event.id = 0
        event.created_at = local_now()
        saved = self.event_repo.save(event)
        if saved is not None:
            logger.info("Event created", event_id=saved.id, name=saved.name, status=EventStatus(saved.status).name)
        return saved

    def set_status(self, event_id: int, status: EventStatus) -> bool:
        if event_id <= 0:
            return False
        if self.event_repo.find_by_id(event_id) is None:
            return False

        # The repository re-checks existence inside its UPDATE
        updated = self.event_repo.set_status_by_id(event_id, status)
        if updated:
            logger.info("Event status changed", event_id=event_id, status=EventStatus(status).name)
        return updated
