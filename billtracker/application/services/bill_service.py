"""Bill service: ownership, amount and category rules around every bill write.

Features:
- Owner and id are fixed at creation; edits cannot reassign them
- New bills may only reference available (not frozen) events
- Annotating writes the annotation row before flagging the bill, both inside
  one transaction when the repositories share a session
"""

from datetime import datetime
from typing import List, Optional

import structlog

from billtracker.core.clock import local_now
from billtracker.domain.repositories.annotation_repository import AnnotationRepository
from billtracker.domain.repositories.bill_repository import BillRepository
from billtracker.domain.repositories.event_repository import EventRepository
from billtracker.domain.schemas.annotation import Annotation
from billtracker.domain.schemas.bill import Bill
from billtracker.domain.schemas.event import EventStatus

logger = structlog.get_logger(__name__)


class BillService:
    def __init__(
        self,
        bill_repo: BillRepository,
        annotation_repo: AnnotationRepository,
        event_repo: EventRepository,
    ):
        self.bill_repo = bill_repo
        self.annotation_repo = annotation_repo
        self.event_repo = event_repo

    def _event_open(self, event_id: int) -> bool:
        event = self.event_repo.find_by_id(event_id)
        return event is not None and event.status == EventStatus.AVAILABLE

    def create_bill(self, owner_id: int, data: Bill) -> Optional[Bill]:
        if owner_id <= 0 or data.amount <= 0:
            logger.debug("Bill rejected", owner_id=owner_id, amount=data.amount)
            return None
        if data.event_id and not self._event_open(data.event_id):
            logger.info("Bill rejected", owner_id=owner_id, event_id=data.event_id, reason="event missing or frozen")
            return None

        bill = data.model_copy(update={"id": 0, "owner_id": owner_id, "has_annotation": False})
        saved = self.bill_repo.save(bill)
        if saved is not None:
            logger.info("Bill created", bill_id=saved.id, owner_id=owner_id, amount=saved.amount)
        return saved

    def get_bill(self, bill_id: int) -> Optional[Bill]:
        if bill_id <= 0:
            return None
        return self.bill_repo.find_by_id(bill_id)

    def query_by_time(self, owner_id: int, start: datetime, end: datetime) -> List[Bill]:
        if owner_id <= 0 or start > end:
            return []
        return self.bill_repo.query_by_time(start, end, owner_id=owner_id)

    def query_by_event(self, owner_id: int, event_id: int) -> List[Bill]:
        if owner_id <= 0 or event_id <= 0:
            return []
        return self.bill_repo.query_by_event(owner_id, event_id)

    def query_by_event_name(self, name: str) -> List[Bill]:
        if not name:
            return []
        return self.bill_repo.query_by_event_name(name)

    def query_by_phone(self, phone: str) -> List[Bill]:
        if not phone:
            return []
        return self.bill_repo.query_by_phone(phone)

    def edit_bill(self, bill_id: int, updates: Bill) -> bool:
        """Replace a bill's description, amount and event; id and owner stay put."""
        if bill_id <= 0:
            return False
        existing = self.bill_repo.find_by_id(bill_id)
        if existing is None:
            return False

        if updates.amount <= 0:
            logger.debug("Bill edit rejected", bill_id=bill_id, amount=updates.amount)
            return False
        if updates.event_id and updates.event_id != existing.event_id and not self._event_open(updates.event_id):
            logger.info("Bill edit rejected", bill_id=bill_id, event_id=updates.event_id, reason="event missing or frozen")
            return False

        bill = updates.model_copy(update={
            "id": existing.id,
            "owner_id": existing.owner_id,
            "created_at": existing.created_at,
            "has_annotation": existing.has_annotation,
            "annotation": existing.annotation,
        })
        if self.bill_repo.save(bill) is None:
            return False
        logger.info("Bill edited", bill_id=bill_id)
        return True

    def delete_bill(self, bill_id: int) -> bool:
        if bill_id <= 0:
            return False
        if self.bill_repo.find_by_id(bill_id) is None:
            return False

        if not self.bill_repo.remove(bill_id):
            return False
        logger.info("Bill deleted", bill_id=bill_id)
        return True

    def annotate_bill(self, bill_id: int, annotation: Annotation) -> bool:
        if bill_id <= 0:
            return False
        bill = self.bill_repo.find_by_id(bill_id)
        if bill is None:
            return False
        if not annotation.content.strip():
            logger.debug("Annotation rejected", bill_id=bill_id, reason="empty content")
            return False

        # Every annotation inserts a new history row; the newest is live
        note = annotation.model_copy(update={"id": 0, "bill_id": bill.id, "created_at": local_now()})

        # If the repositories do not share a session, a crash between the two
        # saves leaves the note stored and the bill unflagged; annotating
        # again repairs it.
        with self.bill_repo.atomic() as scope:
            saved_note = self.annotation_repo.save(note)
            if saved_note is None:
                return False

            bill.annotation = saved_note
            bill.has_annotation = True
            if self.bill_repo.save(bill) is None:
                return False

        if scope.failed:
            return False
        logger.info("Bill annotated", bill_id=bill_id, annotation_id=saved_note.id, author_id=saved_note.authorid)
        return True
