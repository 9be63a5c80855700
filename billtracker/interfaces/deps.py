"""
Dependency wiring: repositories and services over one session.
"""

from dataclasses import dataclass

from sqlalchemy.orm import Session

from billtracker.application.services.auth_service import AuthService
from billtracker.application.services.bill_service import BillService
from billtracker.application.services.event_service import EventService
from billtracker.application.services.statistics_service import StatisticsService
from billtracker.application.services.user_service import UserService
from billtracker.domain.repositories.annotation_repository import AnnotationRepository
from billtracker.domain.repositories.bill_repository import BillRepository
from billtracker.domain.repositories.event_repository import EventRepository
from billtracker.domain.repositories.user_repository import UserRepository
from billtracker.infrastructure.repositories.annotation_repository import SQLAlchemyAnnotationRepository
from billtracker.infrastructure.repositories.bill_repository import SQLAlchemyBillRepository
from billtracker.infrastructure.repositories.event_repository import SQLAlchemyEventRepository
from billtracker.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


def get_user_repository(db: Session) -> UserRepository:
    """Get user repository instance."""
    return SQLAlchemyUserRepository(db)


def get_event_repository(db: Session) -> EventRepository:
    """Get event repository instance."""
    return SQLAlchemyEventRepository(db)


def get_bill_repository(db: Session) -> BillRepository:
    """Get bill repository instance."""
    return SQLAlchemyBillRepository(db)


def get_annotation_repository(db: Session) -> AnnotationRepository:
    """Get annotation repository instance."""
    return SQLAlchemyAnnotationRepository(db)


@dataclass
class Services:
    auth: AuthService
    users: UserService
    events: EventService
    bills: BillService
    statistics: StatisticsService


def build_services(db: Session) -> Services:
    """Build every service over repositories sharing ``db``.

    Sharing the session is what lets BillService.annotate_bill commit the
    annotation and the bill flag together.
    """
    user_repo = get_user_repository(db)
    event_repo = get_event_repository(db)
    bill_repo = get_bill_repository(db)
    annotation_repo = get_annotation_repository(db)

    return Services(
        auth=AuthService(user_repo),
        users=UserService(user_repo),
        events=EventService(event_repo),
        bills=BillService(bill_repo, annotation_repo, event_repo),
        statistics=StatisticsService(bill_repo),
    )
