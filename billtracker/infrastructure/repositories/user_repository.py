"""
SQLAlchemy Implementation of User Repository.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from billtracker.domain.models.user import UserModel
from billtracker.domain.repositories.user_repository import UserRepository
from billtracker.domain.schemas.user import User
from billtracker.infrastructure.repositories.base_repository import SQLAlchemyRepository, storage_guard


class SQLAlchemyUserRepository(SQLAlchemyRepository[UserModel, User], UserRepository):
    """User repository implementation using SQLAlchemy."""

    def __init__(self, db: Session):
        super().__init__(db, UserModel, User)

    @storage_guard()
    def query_by_phone(self, phone: str) -> Optional[User]:
        if not phone:
            return None
        row = self.db.query(UserModel).filter(UserModel.phone == phone).first()
        return self._to_entity(row) if row is not None else None

    @storage_guard(list)
    def query_by_phone_partial(self, partial: str) -> List[User]:
        if not partial:
            return []
        rows = (
            self.db.query(UserModel)
            .filter(UserModel.phone.contains(partial, autoescape=True))
            .order_by(UserModel.id.asc())
            .all()
        )
        return [self._to_entity(row) for row in rows]

    @storage_guard(bool)
    def set_balance_by_phone(self, phone: str, balance: float) -> bool:
        if not phone:
            return False
        row = self.db.query(UserModel).filter(UserModel.phone == phone).first()
        if row is None:
            return False
        row.balance = balance
        self._commit()
        return True
