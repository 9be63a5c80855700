"""
SQLAlchemy Implementation of Bill Repository.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Query, Session

from billtracker.domain.models.annotation import AnnotationModel
from billtracker.domain.models.bill import BillModel
from billtracker.domain.models.event import EventModel
from billtracker.domain.models.user import UserModel
from billtracker.domain.repositories.bill_repository import BillRepository
from billtracker.domain.schemas.annotation import Annotation
from billtracker.domain.schemas.bill import Bill
from billtracker.domain.schemas.event import Event
from billtracker.infrastructure.repositories.base_repository import SQLAlchemyRepository, storage_guard


class SQLAlchemyBillRepository(SQLAlchemyRepository[BillModel, Bill], BillRepository):
    """Bill repository implementation using SQLAlchemy."""

    def __init__(self, db: Session):
        super().__init__(db, BillModel, Bill)

    def _to_entity(self, row: BillModel, event: Optional[EventModel] = None) -> Bill:
        bill = Bill(
            id=row.id,
            owner_id=row.owner_id,
            event_id=row.event_id or 0,
            description=row.description,
            amount=row.amount,
            created_at=row.created_at,
            has_annotation=row.has_annotation,
        )
        # A vanished event leaves the default snapshot in place
        if event is not None:
            bill.event = Event.model_validate(event)
        return bill

    def _to_columns(self, bill: Bill) -> Dict[str, Any]:
        return {
            "owner_id": bill.owner_id,
            "event_id": bill.event_id or None,
            "description": bill.description,
            "amount": bill.amount,
            "created_at": bill.created_at,
            "has_annotation": bill.has_annotation,
        }

    def _joined(self) -> Query:
        return self.db.query(BillModel, EventModel).outerjoin(
            EventModel, BillModel.event_id == EventModel.id
        )

    def _collect(self, query: Query) -> List[Bill]:
        return [self._to_entity(bill, event) for bill, event in query.all()]

    def _in_range(self, start: datetime, end: datetime) -> Query:
        return self._joined().filter(BillModel.created_at >= start, BillModel.created_at <= end)

    @storage_guard()
    def find_by_id(self, id: int) -> Optional[Bill]:
        if id <= 0:
            return None
        result = self._joined().filter(BillModel.id == id).first()
        if result is None:
            return None

        bill_row, event_row = result
        bill = self._to_entity(bill_row, event_row)

        if bill.has_annotation:
            latest = (
                self.db.query(AnnotationModel)
                .filter(AnnotationModel.bill_id == id)
                .order_by(AnnotationModel.id.desc())
                .first()
            )
            if latest is not None:
                bill.annotation = Annotation.model_validate(latest)
        return bill

    @storage_guard(list)
    def query_by_event(self, owner_id: int, event_id: int) -> List[Bill]:
        query = self._joined().filter(
            BillModel.owner_id == owner_id,
            BillModel.event_id == event_id,
        )
        return self._collect(query.order_by(BillModel.created_at.asc(), BillModel.id.asc()))

    @storage_guard(list)
    def query_by_event_name(self, name: str) -> List[Bill]:
        event_id = self.db.query(EventModel.id).filter(EventModel.name == name).scalar()
        if event_id is None:
            return []
        query = self._joined().filter(BillModel.event_id == event_id)
        return self._collect(query.order_by(BillModel.created_at.asc(), BillModel.id.asc()))

    @storage_guard(list)
    def query_by_time(self, start: datetime, end: datetime, owner_id: Optional[int] = None) -> List[Bill]:
        query = self._in_range(start, end)
        if owner_id is not None:
            query = query.filter(BillModel.owner_id == owner_id)
        return self._collect(query.order_by(BillModel.created_at.asc(), BillModel.id.asc()))

    def _time_then_event(self, start: datetime, end: datetime) -> List[Bill]:
        # coalesce keeps uncategorized bills first on every backend
        query = self._in_range(start, end).order_by(
            BillModel.created_at.asc(),
            func.coalesce(BillModel.event_id, 0).asc(),
            BillModel.id.asc(),
        )
        return self._collect(query)

    @storage_guard(list)
    def query_by_time_in_order(self, start: datetime, end: datetime) -> List[Bill]:
        return self._time_then_event(start, end)

    @storage_guard(list)
    def query_by_time_and_event_in_order(self, start: datetime, end: datetime) -> List[Bill]:
        return self._time_then_event(start, end)

    @storage_guard(list)
    def query_by_phone(self, phone: str) -> List[Bill]:
        owner_id = self.db.query(UserModel.id).filter(UserModel.phone == phone).scalar()
        if owner_id is None:
            return []
        query = self._joined().filter(BillModel.owner_id == owner_id)
        return self._collect(query.order_by(BillModel.created_at.asc(), BillModel.id.asc()))

    @storage_guard(bool)
    def remove(self, id: int) -> bool:
        if id <= 0:
            return False
        # Annotations go with their bill
        (
            self.db.query(AnnotationModel)
            .filter(AnnotationModel.bill_id == id)
            .delete(synchronize_session="evaluate")
        )
        self.db.query(BillModel).filter(BillModel.id == id).delete(synchronize_session="evaluate")
        self._commit()
        return True
