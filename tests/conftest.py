"""
Shared fixtures.

Repository and integration tests run against in-memory SQLite with foreign
keys on; service tests run against MagicMock repositories.
"""

from datetime import datetime
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from sqlalchemy.orm import sessionmaker

from billtracker.application.services.auth_service import hash_password
from billtracker.domain.repositories.annotation_repository import AnnotationRepository
from billtracker.domain.repositories.bill_repository import BillRepository
from billtracker.domain.repositories.event_repository import EventRepository
from billtracker.domain.repositories.user_repository import UserRepository
from billtracker.domain.schemas.event import Event, EventStatus
from billtracker.domain.schemas.user import User
from billtracker.core.transaction import TransactionScope
from billtracker.infrastructure.database import create_db_engine, init_db
from billtracker.infrastructure.repositories.annotation_repository import SQLAlchemyAnnotationRepository
from billtracker.infrastructure.repositories.bill_repository import SQLAlchemyBillRepository
from billtracker.infrastructure.repositories.event_repository import SQLAlchemyEventRepository
from billtracker.infrastructure.repositories.user_repository import SQLAlchemyUserRepository

USER_PASSWORD = "password123"
ADMIN_PASSWORD = "admin123"
USER_PASSWORD_HASH = hash_password(USER_PASSWORD)
ADMIN_PASSWORD_HASH = hash_password(ADMIN_PASSWORD)

BASE_TIME = datetime(2025, 3, 1, 12, 0, 0)


# ==================== Storage ====================

@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(autoflush=False, bind=engine)()
    yield session
    session.close()


@pytest.fixture
def user_repo(db):
    return SQLAlchemyUserRepository(db)


@pytest.fixture
def event_repo(db):
    return SQLAlchemyEventRepository(db)


@pytest.fixture
def bill_repo(db):
    return SQLAlchemyBillRepository(db)


@pytest.fixture
def annotation_repo(db):
    return SQLAlchemyAnnotationRepository(db)


@pytest.fixture
def seeded(user_repo, event_repo):
    """Two users and three events; 购物 is frozen."""
    user = user_repo.save(User(
        phone="13800000001",
        username="TestUser1",
        password=USER_PASSWORD_HASH,
        role="user",
        balance=1000.0,
        created_at=BASE_TIME,
    ))
    admin = user_repo.save(User(
        phone="13800000002",
        username="TestAdmin",
        password=ADMIN_PASSWORD_HASH,
        role="admin",
        balance=5000.0,
        created_at=BASE_TIME,
    ))
    dining = event_repo.save(Event(name="餐饮", created_at=BASE_TIME))
    transport = event_repo.save(Event(name="交通", created_at=BASE_TIME))
    shopping = event_repo.save(Event(name="购物", status=EventStatus.FROZEN, created_at=BASE_TIME))
    return SimpleNamespace(
        user=user,
        admin=admin,
        dining=dining,
        transport=transport,
        shopping=shopping,
    )


# ==================== Mocks ====================

def _mock_repository(spec) -> MagicMock:
    repo = MagicMock(spec=spec)
    repo.atomic.return_value.__enter__.return_value = TransactionScope()
    return repo


def assign_id(new_id: int):
    """side_effect for save(): behave like an insert that got ``new_id``."""
    def _save(entity):
        entity.id = new_id
        return entity
    return _save


@pytest.fixture
def mock_user_repo():
    return _mock_repository(UserRepository)


@pytest.fixture
def mock_event_repo():
    return _mock_repository(EventRepository)


@pytest.fixture
def mock_bill_repo():
    return _mock_repository(BillRepository)


@pytest.fixture
def mock_annotation_repo():
    return _mock_repository(AnnotationRepository)
